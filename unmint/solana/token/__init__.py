from .associated import ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_KEY, AssociatedCommand, get_associated_account, \
    create_associated_token_account_idempotent, DecompiledCreateAssociatedAccount, decompile_create_associated_account
from .program import PROGRAM_KEY, TOKEN_2022_PROGRAM_KEY, TOKEN_PROGRAM_KEYS, Command, get_command, \
    transfer, transfer_checked, close_account, DecompiledTransfer, decompile_transfer, DecompiledCloseAccount, \
    decompile_close_account
from .variant import TokenProgram, LegacyTokenProgram, ExtensionsTokenProgram, TokenProgramVariant

__all__ = [
    'PROGRAM_KEY',
    'TOKEN_2022_PROGRAM_KEY',
    'TOKEN_PROGRAM_KEYS',
    'Command',
    'get_command',
    'transfer',
    'transfer_checked',
    'close_account',
    'DecompiledTransfer',
    'decompile_transfer',
    'DecompiledCloseAccount',
    'decompile_close_account',
    'ASSOCIATED_TOKEN_ACCOUNT_PROGRAM_KEY',
    'AssociatedCommand',
    'get_associated_account',
    'create_associated_token_account_idempotent',
    'DecompiledCreateAssociatedAccount',
    'decompile_create_associated_account',
    'TokenProgram',
    'LegacyTokenProgram',
    'ExtensionsTokenProgram',
    'TokenProgramVariant',
]
