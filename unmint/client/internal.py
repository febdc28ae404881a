from typing import NamedTuple, Optional

from solana.exceptions import SolanaRpcException
from solana.rpc.api import Client as RpcClient
from solana.rpc.core import RPCException, UnconfirmedTxError, TransactionExpiredBlockheightExceededError
from solana.rpc.types import TxOpts
from solders.pubkey import Pubkey
from solders.signature import Signature

from unmint import solana
from unmint.error import RpcFailureError, SubmissionRejectedError, error_from_rpc_message
from unmint.keys import PublicKey
from unmint.model import TokenBalance
from unmint.solana.commitment import Commitment


class RecentBlockhash(NamedTuple):
    blockhash: bytes
    last_valid_block_height: int


def _to_pubkey(public_key: PublicKey) -> Pubkey:
    return Pubkey(public_key.raw)


def _rpc_error_message(e: RPCException) -> str:
    if e.args and hasattr(e.args[0], 'message'):
        return e.args[0].message
    return str(e)


def _transport_error_message(e: SolanaRpcException) -> str:
    return getattr(e, 'error_msg', None) or str(e)


class InternalClient:
    """A low level client used for interacting with a Solana RPC node. Every request is made at the configured
    commitment, and every failure is raised as an :class:`Error <unmint.error.Error>`:

    - :exc:`AccountNotFoundError <unmint.error.AccountNotFoundError>` if the node could not find a queried account,
    - :exc:`RpcFailureError <unmint.error.RpcFailureError>` for any other node or transport error,
    - :exc:`SubmissionRejectedError <unmint.error.SubmissionRejectedError>` if a submitted transaction was rejected or
      did not confirm.

    No request is retried.

    :param rpc_client: The solana-py :class:`Client <solana.rpc.api.Client>` to send requests with.
    :param commitment: (optional) The :class:`Commitment <unmint.solana.commitment.Commitment>` to use. Defaults to
        Commitment.CONFIRMED.
    """

    def __init__(self, rpc_client: RpcClient, commitment: Optional[Commitment] = Commitment.CONFIRMED):
        self._rpc = rpc_client
        self._commitment = commitment.to_rpc()

    def get_token_account_balance(self, account: PublicKey) -> TokenBalance:
        """Get the balance of a token account.

        :param account: The :class:`PublicKey <unmint.keys.PublicKey>` of the token account.
        :return: A :class:`TokenBalance <unmint.model.TokenBalance>` object.
        """
        resp = self._call(self._rpc.get_token_account_balance, _to_pubkey(account), commitment=self._commitment)
        return TokenBalance.from_ui_token_amount(resp.value)

    def get_balance(self, account: PublicKey) -> int:
        """Get the native balance of an account.

        :param account: The :class:`PublicKey <unmint.keys.PublicKey>` of the account.
        :return: The balance, in lamports.
        """
        resp = self._call(self._rpc.get_balance, _to_pubkey(account), commitment=self._commitment)
        return resp.value

    def account_exists(self, account: PublicKey) -> bool:
        """Returns whether the specified account exists.
        """
        resp = self._call(self._rpc.get_account_info, _to_pubkey(account), commitment=self._commitment)
        return resp.value is not None

    def get_latest_blockhash(self) -> RecentBlockhash:
        """Get the latest blockhash, along with the last block height at which it is valid.
        """
        resp = self._call(self._rpc.get_latest_blockhash, commitment=self._commitment)
        return RecentBlockhash(bytes(resp.value.blockhash), resp.value.last_valid_block_height)

    def submit_transaction(self, tx: solana.Transaction, last_valid_block_height: Optional[int] = None) -> str:
        """Submit a signed transaction and wait for it to be confirmed.

        :param tx: The signed :class:`Transaction <unmint.solana.Transaction>`.
        :param last_valid_block_height: (optional) The last block height at which the transaction's blockhash is
            valid. If set, confirmation gives up once this height has passed.
        :return: The base58-encoded transaction signature.
        """
        tx_id = Signature(tx.get_signature()) if tx.get_signature() else None

        try:
            resp = self._rpc.send_raw_transaction(
                tx.marshal(),
                opts=TxOpts(skip_confirmation=True, preflight_commitment=self._commitment),
            )
        except RPCException as e:
            raise SubmissionRejectedError(_rpc_error_message(e), tx_id=str(tx_id) if tx_id else None) from e
        except SolanaRpcException as e:
            raise RpcFailureError(_transport_error_message(e)) from e

        tx_id = resp.value

        # The transaction was accepted; errors from here on come from polling its status.
        try:
            statuses = self._rpc.confirm_transaction(
                tx_id,
                commitment=self._commitment,
                last_valid_block_height=last_valid_block_height,
            )
        except (UnconfirmedTxError, TransactionExpiredBlockheightExceededError) as e:
            raise SubmissionRejectedError(str(e), tx_id=str(tx_id)) from e
        except RPCException as e:
            raise RpcFailureError(_rpc_error_message(e)) from e
        except SolanaRpcException as e:
            raise RpcFailureError(_transport_error_message(e)) from e

        status = statuses.value[0] if statuses.value else None
        if status is not None and status.err is not None:
            raise SubmissionRejectedError(f'transaction failed: {status.err}', tx_id=str(tx_id))

        return str(tx_id)

    @staticmethod
    def _call(f, *args, **kwargs):
        try:
            return f(*args, **kwargs)
        except RPCException as e:
            raise error_from_rpc_message(_rpc_error_message(e)) from e
        except SolanaRpcException as e:
            raise RpcFailureError(_transport_error_message(e)) from e
