import os

import base58
from nacl import signing

from unmint.error import DecodeError
from unmint.model.wallet import GeneratedWallet

ED25519_PUB_KEY_SIZE = 32
ED25519_SEED_SIZE = 32
ED25519_PRIV_KEY_SIZE = 64


def _b58decode(value: str) -> bytes:
    try:
        return base58.b58decode(value)
    except ValueError as e:
        raise DecodeError(f'invalid base58 string: {e}') from e


class PublicKey:
    """PublicKey is a representation of an ed25519 public key, used as a Solana address.

    :param public_key: The public key, in raw bytes.
    """

    def __init__(self, public_key: bytes):
        if len(public_key) != ED25519_PUB_KEY_SIZE:
            raise DecodeError(f'public key must be {ED25519_PUB_KEY_SIZE} bytes, got {len(public_key)}')

        self._verify_key = signing.VerifyKey(bytes(public_key))

    def __eq__(self, other):
        if not isinstance(other, PublicKey):
            return False

        return self._verify_key == other._verify_key

    def __hash__(self):
        return hash(self.raw)

    def __repr__(self):
        return f'{self.__class__.__name__}(' \
               f'public_key={self.to_base58()})'

    def __str__(self):
        return self.to_base58()

    @classmethod
    def from_base58(cls, address: str) -> 'PublicKey':
        """Decodes the provided base58-encoded public address and returns a PublicKey object.

        :param address: the base58 encoded public address
        :raise: :exc:`DecodeError <unmint.error.DecodeError>`
        :return: a PublicKey object.
        """
        return cls(_b58decode(address))

    @property
    def raw(self) -> bytes:
        """Returns the raw bytes of the public key.

        :return: bytes
        """
        return bytes(self._verify_key)

    def to_base58(self) -> str:
        """Returns the base58-encoded form of this public key.

        :return: the string base58-encoded public key
        """
        return base58.b58encode(self.raw).decode('utf-8')

    def verify(self, data: bytes, signature: bytes):
        """Verify the provided data and signature match this keypair's public key.
        :param data: The data that was signed.
        :param signature: The signature.
        """
        return self._verify_key.verify(data, signature)


class PrivateKey:
    """PrivateKey is a representation of an ed25519 keypair. It is the opaque key handle passed to every signing
    operation, so a secret only needs to be decoded once.

    :param seed: The 32-byte ed25519 seed.
    """

    def __init__(self, seed: bytes):
        if len(seed) != ED25519_SEED_SIZE:
            raise DecodeError(f'seed must be {ED25519_SEED_SIZE} bytes, got {len(seed)}')

        self._signing_key = signing.SigningKey(bytes(seed))

    def __eq__(self, other):
        if not isinstance(other, PrivateKey):
            return False

        return self._signing_key == other._signing_key

    def __repr__(self):
        # Never include secret material.
        return f'{self.__class__.__name__}(' \
               f'public_key={self.public_key.to_base58()})'

    @classmethod
    def random(cls) -> 'PrivateKey':
        """Returns a Private Key derived from a randomly generated seed.

        :return: A PrivateKey object.
        """
        return cls(os.urandom(ED25519_SEED_SIZE))

    @classmethod
    def from_base58(cls, secret: str) -> 'PrivateKey':
        """Decodes the provided base58-encoded secret and returns a PrivateKey object.

        Both the 64-byte Solana keypair format (seed followed by public key) and a bare 32-byte seed are accepted.

        :param secret: the base58-encoded secret
        :raise: :exc:`DecodeError <unmint.error.DecodeError>`
        :return: a PrivateKey object.
        """
        raw = _b58decode(secret)
        if len(raw) == ED25519_SEED_SIZE:
            return cls(raw)

        if len(raw) != ED25519_PRIV_KEY_SIZE:
            raise DecodeError(f'secret must be {ED25519_SEED_SIZE} or {ED25519_PRIV_KEY_SIZE} bytes, got {len(raw)}')

        key = cls(raw[:ED25519_SEED_SIZE])
        if key.public_key.raw != raw[ED25519_SEED_SIZE:]:
            raise DecodeError('secret public key does not match its seed')

        return key

    @classmethod
    def from_seed(cls, seed: bytes) -> 'PrivateKey':
        """Derives a PrivateKey from seed bytes. Only the first 32 bytes of the seed are used, which means that a
        64-byte keypair array yields the keypair it encodes.

        :param seed: at least 32 bytes of seed material.
        :raise: :exc:`DecodeError <unmint.error.DecodeError>`
        :return: a PrivateKey object.
        """
        if len(seed) < ED25519_SEED_SIZE:
            raise DecodeError(f'seed is too short: {len(seed)} bytes (min {ED25519_SEED_SIZE})')

        return cls(bytes(seed[:ED25519_SEED_SIZE]))

    @property
    def raw(self) -> bytes:
        """Returns the raw bytes of the 32-byte seed.

        :return: bytes
        """
        return bytes(self._signing_key)

    @property
    def secret_bytes(self) -> bytes:
        """Returns the 64-byte Solana keypair encoding: the seed followed by the public key.

        :return: bytes
        """
        return self.raw + self.public_key.raw

    @property
    def public_key(self) -> PublicKey:
        """Returns a :class:`PublicKey <PublicKey>` object corresponding to this private key.

        :return: a :class:`PublicKey <PublicKey>`
        """
        return PublicKey(bytes(self._signing_key.verify_key))

    def to_base58(self) -> str:
        """Returns the base58-encoded 64-byte secret, as exported by Solana wallets.

        :return: the string base58-encoded secret.
        """
        return base58.b58encode(self.secret_bytes).decode('utf-8')

    def sign(self, data: bytes) -> bytes:
        """Sign the provided data.

        :param data: The data to sign.
        :return: The signature.
        """
        return self._signing_key.sign(data).signature


def load(secret: str) -> PrivateKey:
    """Loads a keypair from a base58-encoded secret.

    :raise: :exc:`DecodeError <unmint.error.DecodeError>`
    """
    return PrivateKey.from_base58(secret)


def load_from_seed(seed: bytes) -> PrivateKey:
    """Loads a keypair from raw seed bytes.

    :raise: :exc:`DecodeError <unmint.error.DecodeError>`
    """
    return PrivateKey.from_seed(seed)


def address_of(private_key: PrivateKey) -> str:
    return private_key.public_key.to_base58()


def generate() -> GeneratedWallet:
    """Generates a new random keypair. The caller is responsible for storing the returned secret.

    :return: a :class:`GeneratedWallet <unmint.model.wallet.GeneratedWallet>`
    """
    private_key = PrivateKey.random()
    return GeneratedWallet(
        private_key=private_key,
        secret=private_key.to_base58(),
        secret_bytes=private_key.secret_bytes,
        address=private_key.public_key.to_base58(),
    )
