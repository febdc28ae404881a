from .client import BaseClient, Client, TransferOptions
from .environment import Environment
from .internal import InternalClient

__all__ = [
    'BaseClient',
    'Client',
    'TransferOptions',
    'Environment',
    'InternalClient',
]
