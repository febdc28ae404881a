import hashlib
from typing import List, Tuple

from pure25519.basic import decodepoint, NotOnCurve

from unmint.keys import PublicKey

MAX_SEEDS = 16
MAX_SEED_LENGTH = 32
MAX_UINT8 = 2 ** 8 - 1

_PDA_MARKER = b'ProgramDerivedAddress'


class InvalidPublicKeyError(Exception):
    """
    Raised when the derived address lies on the ed25519 curve.
    """

    def __init__(self):
        super().__init__('invalid public key')


def create_program_address(program: PublicKey, seeds: List[bytes]) -> PublicKey:
    """Derives a program address from the program and seeds. Program addresses are public keys that _do not_ lie on
    the ed25519 curve, which ensures that there is no associated private key. If the program and seeds result in a
    valid point on the curve, InvalidPublicKeyError is raised.

    :return :class:`PublicKey <unmint.keys.PublicKey>`
    """
    if len(seeds) > MAX_SEEDS:
        raise ValueError('too many seeds')

    sha256 = hashlib.sha256()
    for s in seeds:
        if len(s) > MAX_SEED_LENGTH:
            raise ValueError('max seed length exceeded')

        sha256.update(s)

    sha256.update(program.raw)
    sha256.update(_PDA_MARKER)

    pub = sha256.digest()

    try:
        decodepoint(pub)
    except NotOnCurve:
        return PublicKey(pub)

    raise InvalidPublicKeyError()


def find_program_address_with_bump(program: PublicKey, seeds: List[bytes]) -> Tuple[PublicKey, int]:
    """Finds the first valid program address, searching bump seeds from 255 downwards.

    :return: the derived :class:`PublicKey <unmint.keys.PublicKey>` and the bump seed that produced it.
    """
    for bump in range(MAX_UINT8, -1, -1):
        try:
            return create_program_address(program, seeds + [bytes([bump])]), bump
        except InvalidPublicKeyError:
            continue

    raise ValueError('unable to find a viable program address bump seed')


def find_program_address(program: PublicKey, seeds: List[bytes]) -> PublicKey:
    """Finds the canonical program address for the provided program and seeds. Its primary use case is deriving
    associated token accounts.

    return: :class:`PublicKey <unmint.keys.PublicKey>`
    """
    return find_program_address_with_bump(program, seeds)[0]
