from enum import IntEnum
from typing import NamedTuple

from unmint.keys import PublicKey
from unmint.solana.instruction import Instruction, AccountMeta
from unmint.solana.transaction import Message

PROGRAM_KEY = PublicKey(bytes(32))


class Command(IntEnum):
    CREATE_ACCOUNT = 0
    ASSIGN = 1
    TRANSFER = 2


def transfer(source: PublicKey, dest: PublicKey, lamports: int) -> Instruction:
    """
    Account references
      0. [WRITE, SIGNER] Funding account
      1. [WRITE] Recipient account

      Transfer {
        // Number of lamports to transfer
        lamports: u64,
      }
    """
    if lamports < 0:
        raise ValueError('lamports must not be negative')

    data = bytearray()
    data.extend(Command.TRANSFER.to_bytes(4, 'little'))
    data.extend(lamports.to_bytes(8, 'little'))

    return Instruction(
        PROGRAM_KEY,
        data,
        [
            AccountMeta.new(source, True),
            AccountMeta.new(dest, False),
        ],
    )


class DecompiledTransfer(NamedTuple):
    source: PublicKey
    dest: PublicKey
    lamports: int


def decompile_transfer(m: Message, index: int) -> DecompiledTransfer:
    if index >= len(m.instructions):
        raise ValueError(f"instruction doesn't exist at {index}")

    i = m.instructions[index]
    if m.accounts[i.program_index] != PROGRAM_KEY:
        raise ValueError('incorrect program')

    if len(i.accounts) != 2:
        raise ValueError(f'invalid number of accounts: {len(i.accounts)}')

    if len(i.data) != 12:
        raise ValueError(f'invalid instruction data size: {len(i.data)}')

    if int.from_bytes(i.data[0:4], 'little') != Command.TRANSFER:
        raise ValueError('incorrect command')

    return DecompiledTransfer(
        m.accounts[i.accounts[0]],
        m.accounts[i.accounts[1]],
        int.from_bytes(i.data[4:12], 'little'),
    )
