from typing import List, Optional, Tuple, Union

import base58
from solana.rpc.api import Client as RpcClient

from unmint import solana
from unmint.client.environment import Environment
from unmint.client.internal import InternalClient
from unmint.error import DecodeError
from unmint.keys import PrivateKey, PublicKey, ED25519_PRIV_KEY_SIZE
from unmint.model import TokenBalance
from unmint.solana import Commitment, system
from unmint.solana.token import TokenProgramVariant, TokenProgram
from unmint.utils import Amount, to_base_units, sol_to_lamports

_ENDPOINTS = {
    Environment.MAINNET: 'https://api.mainnet-beta.solana.com',
    Environment.DEVNET: 'https://api.devnet.solana.com',
    Environment.TESTNET: 'https://api.testnet.solana.com',
}

_RPC_TIMEOUT_SECONDS = 10

# An account owner: a public key, a base58-encoded address or secret, or a private key.
Owner = Union[PublicKey, PrivateKey, str]

# A signing account: a private key handle, or a base58-encoded secret decoded on use.
Signer = Union[PrivateKey, str]


class TransferOptions:
    """A :class:`TransferOptions <TransferOptions>` for configuring how a transfer transaction is built.

    :param fee_payer: (optional) The :class:`PrivateKey <unmint.keys.PrivateKey>` of the account paying the transaction
        fee and, if needed, the rent of the destination token account. Defaults to the sender.
    :param create_destination: (optional) Whether to check for the destination token account and create it if it does
        not exist. Defaults to True. If False, the transaction fails on-chain when the destination account is missing.
    :param rent_recipient: (optional) The :class:`PublicKey <unmint.keys.PublicKey>` receiving the rent of a closed
        token account. Only used when closing accounts. Defaults to the fee payer.
    """

    def __init__(
        self, fee_payer: Optional[Signer] = None, create_destination: bool = True,
        rent_recipient: Optional[PublicKey] = None,
    ):
        self.fee_payer = fee_payer
        self.create_destination = create_destination
        self.rent_recipient = rent_recipient

    def __repr__(self):
        return f'{self.__class__.__name__}(' \
               f'fee_payer={self.fee_payer!r}, create_destination={self.create_destination}, ' \
               f'rent_recipient={self.rent_recipient!r})'


class BaseClient:
    """An interface for sending and closing token accounts.
    """

    def send_token(
        self, sender: Signer, destination: Owner, mint: Union[PublicKey, str], amount: Amount,
        options: Optional[TransferOptions] = None,
    ) -> str:
        """Sends an amount of tokens from the sender's associated token account to the destination's.

        :param sender: The :class:`PrivateKey <unmint.keys.PrivateKey>` of the sender.
        :param destination: The owner of the destination account.
        :param mint: The token mint.
        :param amount: The decimal amount of tokens to send. Precision beyond the mint decimals is truncated.
        :param options: (optional) The :class:`TransferOptions <TransferOptions>` to use.

        :raise: :exc:`DecodeError <unmint.error.DecodeError>`
        :raise: :exc:`AccountNotFoundError <unmint.error.AccountNotFoundError>`
        :raise: :exc:`RpcFailureError <unmint.error.RpcFailureError>`
        :raise: :exc:`SubmissionRejectedError <unmint.error.SubmissionRejectedError>`

        :return: The base58-encoded signature of the transaction.
        """
        raise NotImplementedError('BaseClient is an abstract class. Subclasses must implement send_token')

    def send_max_token(
        self, sender: Signer, destination: Owner, mint: Union[PublicKey, str],
        options: Optional[TransferOptions] = None,
    ) -> str:
        """Sends the entire token balance of the sender's associated token account to the destination's.

        :raise: :exc:`AccountNotFoundError <unmint.error.AccountNotFoundError>`
        :return: The base58-encoded signature of the transaction.
        """
        raise NotImplementedError('BaseClient is an abstract class. Subclasses must implement send_max_token')

    def send_and_close(
        self, sender: Signer, destination: Owner, mint: Union[PublicKey, str],
        options: Optional[TransferOptions] = None,
    ) -> str:
        """Sends the entire token balance of the sender's associated token account to the destination's, then closes
        the sender's account in the same transaction, reclaiming its rent.

        :raise: :exc:`AccountNotFoundError <unmint.error.AccountNotFoundError>` if the sender has no associated token
            account, i.e. there is nothing to send or close.
        :return: The base58-encoded signature of the transaction.
        """
        raise NotImplementedError('BaseClient is an abstract class. Subclasses must implement send_and_close')

    def transfer_sol(
        self, sender: Signer, destination: Owner, amount: Amount, options: Optional[TransferOptions] = None,
    ) -> str:
        """Sends native SOL.

        :param amount: The decimal amount of SOL to send.
        :return: The base58-encoded signature of the transaction.
        """
        raise NotImplementedError('BaseClient is an abstract class. Subclasses must implement transfer_sol')

    def balance(self, owner: Owner, mint: Union[PublicKey, str]) -> TokenBalance:
        """Retrieves the balance of the owner's associated token account.

        :param owner: The owner of the account, as a public key, private key, or base58-encoded address or secret.
        :param mint: The token mint.

        :raise: :exc:`AccountNotFoundError <unmint.error.AccountNotFoundError>`
        :return: a :class:`TokenBalance <unmint.model.TokenBalance>`
        """
        raise NotImplementedError('BaseClient is an abstract class. Subclasses must implement balance')

    def balance_sol(self, address: Owner) -> int:
        """Retrieves the native balance of an account.

        :return: The balance, in lamports.
        """
        raise NotImplementedError('BaseClient is an abstract class. Subclasses must implement balance_sol')


class Client(BaseClient):
    """A :class:`Client <Client>` object for sending tokens and closing token accounts on Solana.

    :param env: (optional) The :class:`Environment <unmint.client.environment.Environment>` to use. Defaults to
        Environment.MAINNET.
    :param token_program: (optional) The :class:`TokenProgramVariant <unmint.solana.token.TokenProgramVariant>` used
        for every operation of this client. Defaults to TokenProgramVariant.LEGACY.
    :param endpoint: (optional) An RPC endpoint to use instead of the default endpoint of `env`. Only one of endpoint
        or rpc_client should be set.
    :param rpc_client: (optional) A solana-py :class:`Client <solana.rpc.api.Client>` to use for RPC requests. Only one
        of endpoint or rpc_client should be set.
    :param timeout: (optional) The RPC request timeout, in seconds. Ignored if rpc_client is set.
    """

    def __init__(
        self, env: Environment = Environment.MAINNET, token_program: TokenProgramVariant = TokenProgramVariant.LEGACY,
        endpoint: Optional[str] = None, rpc_client: Optional[RpcClient] = None,
        timeout: float = _RPC_TIMEOUT_SECONDS,
    ):
        if rpc_client and endpoint:
            raise ValueError('`rpc_client` and `endpoint` cannot both be set')

        if not rpc_client:
            endpoint = endpoint if endpoint else _ENDPOINTS[env]
            rpc_client = RpcClient(endpoint, commitment=Commitment.CONFIRMED.to_rpc(), timeout=timeout)

        self._token_program = token_program.program()
        self._internal_client = InternalClient(rpc_client, Commitment.CONFIRMED)

    @property
    def token_program(self) -> TokenProgram:
        return self._token_program

    def get_associated_account(self, owner: Owner, mint: Union[PublicKey, str]) -> PublicKey:
        """Returns the associated token account of the owner for the mint, under this client's token program.
        """
        return self._token_program.associated_account(_resolve_owner(owner), _resolve_mint(mint))

    def send_token(
        self, sender: Signer, destination: Owner, mint: Union[PublicKey, str], amount: Amount,
        options: Optional[TransferOptions] = None,
    ) -> str:
        sender, fee_payer, options = _resolve_signers(sender, options)
        owner = _resolve_owner(destination)
        mint = _resolve_mint(mint)

        source = self._token_program.associated_account(sender.public_key, mint)
        balance = self._internal_client.get_token_account_balance(source)

        quarks = to_base_units(amount, balance.decimals)
        return self._submit_transfer(sender, fee_payer, owner, mint, quarks, balance.decimals, options)

    def send_max_token(
        self, sender: Signer, destination: Owner, mint: Union[PublicKey, str],
        options: Optional[TransferOptions] = None,
    ) -> str:
        sender, fee_payer, options = _resolve_signers(sender, options)
        owner = _resolve_owner(destination)
        mint = _resolve_mint(mint)

        source = self._token_program.associated_account(sender.public_key, mint)
        balance = self._internal_client.get_token_account_balance(source)

        return self._submit_transfer(sender, fee_payer, owner, mint, balance.quarks, balance.decimals, options)

    def send_and_close(
        self, sender: Signer, destination: Owner, mint: Union[PublicKey, str],
        options: Optional[TransferOptions] = None,
    ) -> str:
        sender, fee_payer, options = _resolve_signers(sender, options)
        owner = _resolve_owner(destination)
        mint = _resolve_mint(mint)

        source = self._token_program.associated_account(sender.public_key, mint)
        balance = self._internal_client.get_token_account_balance(source)

        return self._submit_transfer(sender, fee_payer, owner, mint, balance.quarks, balance.decimals, options,
                                     close_source=True)

    def transfer_sol(
        self, sender: Signer, destination: Owner, amount: Amount, options: Optional[TransferOptions] = None,
    ) -> str:
        sender, fee_payer, _ = _resolve_signers(sender, options)
        lamports = sol_to_lamports(amount)

        instructions = [system.transfer(sender.public_key, _resolve_owner(destination), lamports)]
        return self._sign_and_submit_tx(fee_payer, [sender], instructions)

    def balance(self, owner: Owner, mint: Union[PublicKey, str]) -> TokenBalance:
        account = self._token_program.associated_account(_resolve_owner(owner), _resolve_mint(mint))
        return self._internal_client.get_token_account_balance(account)

    def balance_sol(self, address: Owner) -> int:
        return self._internal_client.get_balance(_resolve_owner(address))

    def _submit_transfer(
        self, sender: PrivateKey, fee_payer: PrivateKey, owner: PublicKey, mint: PublicKey, quarks: int,
        decimals: int, options: TransferOptions, close_source: bool = False,
    ) -> str:
        source = self._token_program.associated_account(sender.public_key, mint)
        dest = self._token_program.associated_account(owner, mint)

        instructions = []
        if options.create_destination and not self._internal_client.account_exists(dest):
            instructions.append(self._token_program.create_associated_account(fee_payer.public_key, owner, mint))

        instructions.append(self._token_program.transfer(source, dest, sender.public_key, quarks, decimals, mint))

        if close_source:
            rent_recipient = options.rent_recipient if options.rent_recipient else fee_payer.public_key
            instructions.append(self._token_program.close_account(source, rent_recipient, sender.public_key))

        return self._sign_and_submit_tx(fee_payer, [sender], instructions)

    def _sign_and_submit_tx(
        self, fee_payer: PrivateKey, signers: List[PrivateKey], instructions: List[solana.Instruction],
    ) -> str:
        tx = solana.Transaction.new(fee_payer.public_key, instructions)

        recent_blockhash = self._internal_client.get_latest_blockhash()
        tx.set_blockhash(recent_blockhash.blockhash)
        tx.sign(_unique_signers([fee_payer] + signers))

        return self._internal_client.submit_transaction(tx, recent_blockhash.last_valid_block_height)


def _resolve_owner(owner: Owner) -> PublicKey:
    if isinstance(owner, PublicKey):
        return owner
    if isinstance(owner, PrivateKey):
        return owner.public_key
    if isinstance(owner, str):
        try:
            raw = base58.b58decode(owner)
        except ValueError as e:
            raise DecodeError(f'invalid base58 string: {e}') from e

        if len(raw) == ED25519_PRIV_KEY_SIZE:
            return PrivateKey.from_base58(owner).public_key
        return PublicKey(raw)

    raise TypeError(f'unsupported owner type: {type(owner).__name__}')


def _resolve_signer(signer: Signer) -> PrivateKey:
    if isinstance(signer, PrivateKey):
        return signer
    if isinstance(signer, str):
        return PrivateKey.from_base58(signer)

    raise TypeError(f'unsupported signer type: {type(signer).__name__}')


def _resolve_signers(
    sender: Signer, options: Optional[TransferOptions],
) -> Tuple[PrivateKey, PrivateKey, TransferOptions]:
    options = options if options else TransferOptions()
    sender = _resolve_signer(sender)
    fee_payer = _resolve_signer(options.fee_payer) if options.fee_payer else sender
    return sender, fee_payer, options


def _resolve_mint(mint: Union[PublicKey, str]) -> PublicKey:
    if isinstance(mint, PublicKey):
        return mint
    return PublicKey.from_base58(mint)


def _unique_signers(signers: List[PrivateKey]) -> List[PrivateKey]:
    unique = []
    for s in signers:
        if s not in unique:
            unique.append(s)
    return unique
