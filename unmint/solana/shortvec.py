from typing import Tuple

_MAX_UINT16 = 2 ** 16 - 1
_MAX_ENCODED_BYTES = 3


def encode_length(b: bytearray, length: int) -> int:
    """ Appends the compact-u16 ("shortvec") encoding of `length` to the byte array.

    :param b: The byte array to encode the length into.
    :param length: The length to encode, in the range [0, 2**16).
    :return: The number of bytes written to the array.
    """
    if length < 0 or length > _MAX_UINT16:
        raise ValueError(f'length must be in the range [0, {_MAX_UINT16}]')

    start = len(b)
    while length >= 0x80:
        b.append((length & 0x7f) | 0x80)
        length >>= 7
    b.append(length)

    return len(b) - start


def decode_length(b: bytes) -> Tuple[int, int]:
    """ Decodes a compact-u16 length from the start of the provided bytes.

    :param b: The provided bytes
    :return: The decoded length and the number of bytes it used.
    """
    length = 0
    for offset, val in enumerate(b[:_MAX_ENCODED_BYTES]):
        length |= (val & 0x7f) << (offset * 7)
        if (val & 0x80) == 0:
            return length, offset + 1

    raise ValueError(f'invalid compact-u16 length (max {_MAX_ENCODED_BYTES} bytes)')
