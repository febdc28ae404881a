from typing import List, Optional
from unittest.mock import MagicMock

from solders.hash import Hash
from solders.signature import Signature

from unmint.keys import PrivateKey


def generate_keys(amount) -> List[PrivateKey]:
    return [PrivateKey.random() for _ in range(amount)]


def mock_rpc_client(
    amount: str = '1000000', decimals: int = 6, destination_exists: bool = False,
    confirm_err: Optional[object] = None,
) -> MagicMock:
    """Returns a stand-in for a solana-py RPC client holding a single token account balance.
    """
    rpc = MagicMock()
    rpc.get_token_account_balance.return_value = MagicMock(value=MagicMock(
        amount=amount,
        decimals=decimals,
        ui_amount=None,
        ui_amount_string='',
    ))
    rpc.get_account_info.return_value = MagicMock(value=MagicMock() if destination_exists else None)
    rpc.get_balance.return_value = MagicMock(value=5000)
    rpc.get_latest_blockhash.return_value = MagicMock(value=MagicMock(
        blockhash=Hash.default(),
        last_valid_block_height=100,
    ))
    rpc.send_raw_transaction.return_value = MagicMock(value=Signature.default())
    rpc.confirm_transaction.return_value = MagicMock(value=[MagicMock(err=confirm_err)])
    return rpc
