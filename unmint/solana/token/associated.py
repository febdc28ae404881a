from enum import IntEnum
from typing import NamedTuple

from unmint.keys import PublicKey
from unmint.solana import system
from unmint.solana.address import find_program_address
from unmint.solana.instruction import Instruction, AccountMeta
from unmint.solana.transaction import Message
from .program import PROGRAM_KEY, TOKEN_PROGRAM_KEYS

ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_KEY = PublicKey.from_base58('ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL')


class AssociatedCommand(IntEnum):
    CREATE = 0
    CREATE_IDEMPOTENT = 1


def get_associated_account(wallet: PublicKey, mint: PublicKey, token_program: PublicKey = PROGRAM_KEY) -> PublicKey:
    """Derives the associated token account of `wallet` for `mint`. The token program is part of the derivation, so
    the legacy and Token-2022 programs yield different addresses for the same wallet and mint.
    """
    return find_program_address(
        ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_KEY,
        [
            wallet.raw,
            token_program.raw,
            mint.raw,
        ],
    )


def create_associated_token_account_idempotent(
    subsidizer: PublicKey, wallet: PublicKey, mint: PublicKey, token_program: PublicKey = PROGRAM_KEY,
) -> Instruction:
    """Creates the associated token account of `wallet` for `mint`, funded by `subsidizer`. The instruction succeeds
    without changes if the account already exists.
    """
    addr = get_associated_account(wallet, mint, token_program)
    return Instruction(
        ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_KEY,
        bytes([AssociatedCommand.CREATE_IDEMPOTENT]),
        [
            AccountMeta.new(subsidizer, True),
            AccountMeta.new(addr, False),
            AccountMeta.new_read_only(wallet, False),
            AccountMeta.new_read_only(mint, False),
            AccountMeta.new_read_only(system.PROGRAM_KEY, False),
            AccountMeta.new_read_only(token_program, False),
        ],
    )


class DecompiledCreateAssociatedAccount(NamedTuple):
    subsidizer: PublicKey
    address: PublicKey
    owner: PublicKey
    mint: PublicKey
    token_program: PublicKey


def decompile_create_associated_account(m: Message, index: int) -> DecompiledCreateAssociatedAccount:
    if index >= len(m.instructions):
        raise ValueError(f"instruction doesn't exist at {index}")

    i = m.instructions[index]

    if m.accounts[i.program_index] != ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_KEY:
        raise ValueError('incorrect program')

    if len(i.data) > 1 or (i.data and i.data[0] not in (AssociatedCommand.CREATE, AssociatedCommand.CREATE_IDEMPOTENT)):
        raise ValueError(f'invalid instruction data: {i.data}')

    if len(i.accounts) < 6:
        raise ValueError(f'invalid number of accounts: {len(i.accounts)}')

    if m.accounts[i.accounts[4]] != system.PROGRAM_KEY:
        raise ValueError('system program key mismatch')

    if m.accounts[i.accounts[5]] not in TOKEN_PROGRAM_KEYS:
        raise ValueError('token program key mismatch')

    return DecompiledCreateAssociatedAccount(
        m.accounts[i.accounts[0]],
        m.accounts[i.accounts[1]],
        m.accounts[i.accounts[2]],
        m.accounts[i.accounts[3]],
        m.accounts[i.accounts[5]],
    )
