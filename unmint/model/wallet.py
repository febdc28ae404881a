from typing import NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from unmint.keys import PrivateKey


class GeneratedWallet(NamedTuple):
    """A freshly generated keypair, along with its exportable forms.

    :param private_key: The :class:`PrivateKey <unmint.keys.PrivateKey>` handle.
    :param secret: The base58-encoded 64-byte secret.
    :param secret_bytes: The raw 64-byte secret (seed followed by public key).
    :param address: The base58-encoded public address.
    """
    private_key: 'PrivateKey'
    secret: str
    secret_bytes: bytes
    address: str
