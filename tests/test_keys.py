import base58
import pytest

from unmint import keys
from unmint.error import DecodeError
from unmint.keys import PublicKey, PrivateKey


class TestKeys:
    def test_base58_roundtrip(self):
        priv = PrivateKey.random()
        assert PrivateKey.from_base58(priv.to_base58()) == priv
        assert priv.public_key.from_base58(priv.public_key.to_base58()) == priv.public_key

    def test_secret_formats(self):
        priv = PrivateKey.random()

        # 64-byte keypair secret
        assert len(base58.b58decode(priv.to_base58())) == 64
        assert PrivateKey.from_base58(priv.to_base58()) == priv

        # bare 32-byte seed
        seed = base58.b58encode(priv.raw).decode()
        assert PrivateKey.from_base58(seed) == priv

    def test_invalid_secret(self):
        with pytest.raises(DecodeError):
            PrivateKey.from_base58('0OIl')  # not base58

        with pytest.raises(DecodeError):
            PrivateKey.from_base58(base58.b58encode(bytes(10)).decode())

        # mismatched public key half
        a, b = PrivateKey.random(), PrivateKey.random()
        mismatched = base58.b58encode(a.raw + b.public_key.raw).decode()
        with pytest.raises(DecodeError):
            PrivateKey.from_base58(mismatched)

    def test_invalid_public_key(self):
        with pytest.raises(DecodeError):
            PublicKey(bytes(31))

        with pytest.raises(DecodeError):
            PublicKey.from_base58('invalid0')

        # DecodeError is a ValueError
        with pytest.raises(ValueError):
            PublicKey.from_base58(base58.b58encode(bytes(64)).decode())

    def test_from_seed(self):
        priv = PrivateKey.random()
        assert PrivateKey.from_seed(priv.raw) == priv
        assert PrivateKey.from_seed(priv.secret_bytes) == priv
        assert keys.load_from_seed(priv.raw + bytes(8)) == priv

        with pytest.raises(DecodeError):
            PrivateKey.from_seed(bytes(31))

    def test_sign_verify(self):
        priv = PrivateKey.random()
        sig = priv.sign(b'hello')
        assert len(sig) == 64
        priv.public_key.verify(b'hello', sig)

    def test_repr_hides_secret(self):
        priv = PrivateKey.random()
        assert priv.to_base58() not in repr(priv)
        assert priv.public_key.to_base58() in repr(priv)

    def test_public_key_hashable(self):
        priv = PrivateKey.random()
        pub = PublicKey(priv.public_key.raw)
        assert {priv.public_key, pub} == {pub}
        assert str(pub) == pub.to_base58()

    def test_load(self):
        priv = PrivateKey.random()
        loaded = keys.load(priv.to_base58())
        assert loaded == priv
        assert keys.address_of(loaded) == priv.public_key.to_base58()

    def test_load_known_keypair(self):
        # RFC 8032 section 7.1, test 1
        seed = bytes.fromhex('9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60')
        public_key = bytes.fromhex('d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a')
        secret = '49W385L4rePHy6PAaQUovbD2aacgN4HsKXSMeUzRg4fmwXszN91JuMFrQRj3vMDpZuRF3ZknQBuRBoWQJEfXstMw'
        address = 'FVen3X669xLzsi6N2V91DoiyzHzg1uAgqiT8jZ9nS96Z'

        loaded = keys.load(secret)
        assert keys.address_of(loaded) == address
        assert loaded.raw == seed
        assert loaded.public_key.raw == public_key
        assert loaded.secret_bytes == seed + public_key
        assert loaded.to_base58() == secret

        assert keys.address_of(keys.load_from_seed(seed)) == address
        assert keys.address_of(keys.load_from_seed(seed + public_key)) == address

    def test_generate(self):
        wallet = keys.generate()

        assert len(wallet.secret_bytes) == 64
        assert base58.b58decode(wallet.secret) == wallet.secret_bytes
        assert wallet.address == wallet.private_key.public_key.to_base58()
        assert keys.load(wallet.secret) == wallet.private_key
        assert wallet.secret_bytes[32:] == PublicKey.from_base58(wallet.address).raw

        assert keys.generate().address != wallet.address
