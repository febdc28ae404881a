from .program import PROGRAM_KEY, Command, transfer, DecompiledTransfer, decompile_transfer

__all__ = [
    'PROGRAM_KEY',
    'Command',
    'transfer',
    'DecompiledTransfer',
    'decompile_transfer',
]
