from enum import Enum


class Environment(Enum):
    """A Solana cluster.
    """

    # Interacts with Solana mainnet-beta.
    MAINNET = 1

    # Interacts with Solana devnet.
    DEVNET = 2

    # Interacts with Solana testnet.
    TESTNET = 3
