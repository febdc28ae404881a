from typing import Optional

# Substring reported by Solana nodes when a queried account does not exist.
ACCOUNT_NOT_FOUND_MESSAGE = 'could not find account'


class Error(Exception):
    """Base error for unmint errors.
    """

    def __init__(self, message: Optional[str] = ''):
        self.message = message
        super().__init__(self.message)


class DecodeError(Error, ValueError):
    """Raised when a key, address or seed could not be decoded. This is always raised before any network request is
    made.
    """


class AccountNotFoundError(Error):
    """Raised when an account could not be found.
    """


class RpcFailureError(Error):
    """Raised when the RPC node or the transport to it reported an error. The original message is preserved in
    `message`.
    """


class TransactionError(Error):
    """Base error for transaction submission errors.

    :param tx_id: The id of the transaction, if available.
    """

    def __init__(self, message: Optional[str] = '', tx_id: Optional[str] = None):
        super().__init__(message)
        self.tx_id = tx_id


class SubmissionRejectedError(TransactionError):
    """Raised when a signed transaction was rejected by the network, or failed to be confirmed.
    """


def error_from_rpc_message(message: str) -> Error:
    """Maps an error message reported by a Solana node to an :class:`Error <Error>`.

    :param message: The message returned by the node.
    :return: An :class:`AccountNotFoundError <AccountNotFoundError>` if the message indicates a missing account,
        otherwise a :class:`RpcFailureError <RpcFailureError>`.
    """
    if ACCOUNT_NOT_FOUND_MESSAGE in message:
        return AccountNotFoundError(message)

    return RpcFailureError(message)
