from .address import create_program_address, find_program_address
from .commitment import Commitment
from .instruction import Instruction, AccountMeta
from .transaction import Transaction, SIGNATURE_LENGTH, HASH_LENGTH

__all__ = [
    'create_program_address',
    'find_program_address',
    'Commitment',
    'Instruction',
    'AccountMeta',
    'Transaction',
    'SIGNATURE_LENGTH',
    'HASH_LENGTH',
]
