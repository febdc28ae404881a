from .balance import TokenBalance
from .wallet import GeneratedWallet

__all__ = [
    'TokenBalance',
    'GeneratedWallet',
]
