from enum import IntEnum
from typing import NamedTuple, Optional

from unmint.keys import PublicKey
from unmint.solana.instruction import Instruction, AccountMeta
from unmint.solana.transaction import Message

PROGRAM_KEY = PublicKey.from_base58('TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA')
TOKEN_2022_PROGRAM_KEY = PublicKey.from_base58('TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb')

TOKEN_PROGRAM_KEYS = (PROGRAM_KEY, TOKEN_2022_PROGRAM_KEY)

_MAX_UINT64 = 2 ** 64 - 1


class Command(IntEnum):
    INITIALIZE_MINT = 0
    INITIALIZE_ACCOUNT = 1
    INITIALIZE_MULTISIG = 2
    TRANSFER = 3
    APPROVE = 4
    REVOKE = 5
    SET_AUTHORITY = 6
    MINT_TO = 7
    BURN = 8
    CLOSE_ACCOUNT = 9
    FREEZE_ACCOUNT = 10
    THAW_ACCOUNT = 11
    TRANSFER_CHECKED = 12
    APPROVE_CHECKED = 13
    MINT_TO_CHECKED = 14
    BURN_CHECKED = 15


def _encode_amount(amount: int) -> bytes:
    if amount < 0 or amount > _MAX_UINT64:
        raise ValueError(f'amount must be in the range [0, {_MAX_UINT64}]')

    return amount.to_bytes(8, 'little')


def _compiled_token_instruction(m: Message, index: int):
    if index >= len(m.instructions):
        raise ValueError(f"instruction doesn't exist at {index}")

    i = m.instructions[index]
    if m.accounts[i.program_index] not in TOKEN_PROGRAM_KEYS:
        raise ValueError('incorrect program')

    return i


def get_command(m: Message, index: int) -> Command:
    i = _compiled_token_instruction(m, index)
    if len(i.data) == 0:
        raise ValueError('token instruction missing data')

    return Command(i.data[0])


def transfer(
    source: PublicKey, dest: PublicKey, owner: PublicKey, amount: int, token_program: PublicKey = PROGRAM_KEY,
) -> Instruction:
    """
    // Accounts expected by this instruction:
    //
    //   * Single owner/delegate
    //   0. `[writable]` The source account.
    //   1. `[writable]` The destination account.
    //   2. `[signer]` The source account's owner/delegate.
    """
    data = bytearray()
    data.append(Command.TRANSFER)
    data.extend(_encode_amount(amount))

    return Instruction(
        token_program,
        data,
        [
            AccountMeta.new(source, False),
            AccountMeta.new(dest, False),
            AccountMeta.new_read_only(owner, True),
        ]
    )


def transfer_checked(
    source: PublicKey, mint: PublicKey, dest: PublicKey, owner: PublicKey, amount: int, decimals: int,
    token_program: PublicKey = PROGRAM_KEY,
) -> Instruction:
    """
    // Accounts expected by this instruction:
    //
    //   * Single owner/delegate
    //   0. `[writable]` The source account.
    //   1. `[]` The token mint.
    //   2. `[writable]` The destination account.
    //   3. `[signer]` The source account's owner/delegate.
    """
    if decimals < 0 or decimals > 255:
        raise ValueError('decimals must be in the range [0, 255]')

    data = bytearray()
    data.append(Command.TRANSFER_CHECKED)
    data.extend(_encode_amount(amount))
    data.append(decimals)

    return Instruction(
        token_program,
        data,
        [
            AccountMeta.new(source, False),
            AccountMeta.new_read_only(mint, False),
            AccountMeta.new(dest, False),
            AccountMeta.new_read_only(owner, True),
        ]
    )


def close_account(
    account: PublicKey, dest: PublicKey, owner: PublicKey, token_program: PublicKey = PROGRAM_KEY,
) -> Instruction:
    """
    // Accounts expected by this instruction:
    //
    //   * Single owner
    //   0. `[writable]` The account to close.
    //   1. `[writable]` The destination account for the remaining lamports.
    //   2. `[signer]` The account's owner.
    """
    return Instruction(
        token_program,
        bytes([Command.CLOSE_ACCOUNT]),
        [
            AccountMeta.new(account, False),
            AccountMeta.new(dest, False),
            AccountMeta.new_read_only(owner, True),
        ]
    )


class DecompiledTransfer(NamedTuple):
    source: PublicKey
    dest: PublicKey
    owner: PublicKey
    amount: int
    program: PublicKey
    mint: Optional[PublicKey] = None
    decimals: Optional[int] = None


def decompile_transfer(m: Message, index: int) -> DecompiledTransfer:
    """Decompiles either a Transfer or a TransferChecked instruction. `mint` and `decimals` are only set for the
    latter.
    """
    i = _compiled_token_instruction(m, index)
    program = m.accounts[i.program_index]

    if len(i.data) == 0:
        raise ValueError('token instruction missing data')

    if i.data[0] == Command.TRANSFER:
        if len(i.accounts) != 3:
            raise ValueError(f'invalid number of accounts: {len(i.accounts)}')
        if len(i.data) != 9:
            raise ValueError(f'invalid instruction data size: {len(i.data)}')

        return DecompiledTransfer(
            m.accounts[i.accounts[0]],
            m.accounts[i.accounts[1]],
            m.accounts[i.accounts[2]],
            int.from_bytes(i.data[1:9], 'little'),
            program,
        )

    if i.data[0] == Command.TRANSFER_CHECKED:
        if len(i.accounts) != 4:
            raise ValueError(f'invalid number of accounts: {len(i.accounts)}')
        if len(i.data) != 10:
            raise ValueError(f'invalid instruction data size: {len(i.data)}')

        return DecompiledTransfer(
            m.accounts[i.accounts[0]],
            m.accounts[i.accounts[2]],
            m.accounts[i.accounts[3]],
            int.from_bytes(i.data[1:9], 'little'),
            program,
            mint=m.accounts[i.accounts[1]],
            decimals=i.data[9],
        )

    raise ValueError(f'invalid instruction data: {i.data}')


class DecompiledCloseAccount(NamedTuple):
    account: PublicKey
    destination: PublicKey
    owner: PublicKey
    program: PublicKey


def decompile_close_account(m: Message, index: int) -> DecompiledCloseAccount:
    i = _compiled_token_instruction(m, index)

    if len(i.data) != 1 or i.data[0] != Command.CLOSE_ACCOUNT:
        raise ValueError(f'invalid instruction data: {i.data}')

    # note: we do < 3 instead of != 3 in order to support multisig cases.
    if len(i.accounts) < 3:
        raise ValueError(f'invalid number of accounts: {len(i.accounts)}')

    return DecompiledCloseAccount(
        m.accounts[i.accounts[0]],
        m.accounts[i.accounts[1]],
        m.accounts[i.accounts[2]],
        m.accounts[i.program_index],
    )
