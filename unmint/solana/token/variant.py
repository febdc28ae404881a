from enum import Enum

from unmint.keys import PublicKey
from unmint.solana.instruction import Instruction
from .associated import get_associated_account, create_associated_token_account_idempotent
from .program import PROGRAM_KEY, TOKEN_2022_PROGRAM_KEY, transfer, transfer_checked, close_account


class TokenProgram:
    """An interface over the on-chain token program used by a client. An implementation is chosen once and used for
    every account derivation and instruction, so a transaction never mixes token programs.
    """

    def program_id(self) -> PublicKey:
        """Returns the address of the token program.
        """
        raise NotImplementedError('TokenProgram is an abstract class. Subclasses must implement program_id')

    def associated_account(self, owner: PublicKey, mint: PublicKey) -> PublicKey:
        """Returns the associated token account of `owner` for `mint`.

        :param owner: The :class:`PublicKey <unmint.keys.PublicKey>` of the wallet owning the account.
        :param mint: The :class:`PublicKey <unmint.keys.PublicKey>` of the token mint.
        """
        return get_associated_account(owner, mint, self.program_id())

    def transfer(
        self, source: PublicKey, dest: PublicKey, authority: PublicKey, amount: int, decimals: int, mint: PublicKey,
    ) -> Instruction:
        """Returns an instruction transferring `amount` tokens, in the smallest unit of the mint.

        :param source: The token account to transfer from.
        :param dest: The token account to transfer to.
        :param authority: The owner of `source`, who must sign the transaction.
        :param amount: The amount, in the smallest unit of the mint.
        :param decimals: The decimals of the mint. Implementations that check decimals will fail on-chain if this
            does not match the mint.
        :param mint: The token mint.
        """
        raise NotImplementedError('TokenProgram is an abstract class. Subclasses must implement transfer')

    def close_account(self, account: PublicKey, destination: PublicKey, authority: PublicKey) -> Instruction:
        """Returns an instruction closing `account` and sending its lamports to `destination`. The network rejects the
        instruction if the account still holds tokens.
        """
        return close_account(account, destination, authority, token_program=self.program_id())

    def create_associated_account(self, payer: PublicKey, owner: PublicKey, mint: PublicKey) -> Instruction:
        """Returns an instruction creating the associated token account of `owner` for `mint`, paid for by `payer`.
        The instruction is a no-op on-chain if the account already exists.
        """
        return create_associated_token_account_idempotent(payer, owner, mint, token_program=self.program_id())


class LegacyTokenProgram(TokenProgram):
    """The original SPL token program. Transfers do not check the mint decimals.
    """

    def program_id(self) -> PublicKey:
        return PROGRAM_KEY

    def transfer(
        self, source: PublicKey, dest: PublicKey, authority: PublicKey, amount: int, decimals: int, mint: PublicKey,
    ) -> Instruction:
        return transfer(source, dest, authority, amount, token_program=PROGRAM_KEY)


class ExtensionsTokenProgram(TokenProgram):
    """The Token-2022 (token extensions) program. Transfers are decimals-checked, which is required by mints that use
    transfer-affecting extensions.
    """

    def program_id(self) -> PublicKey:
        return TOKEN_2022_PROGRAM_KEY

    def transfer(
        self, source: PublicKey, dest: PublicKey, authority: PublicKey, amount: int, decimals: int, mint: PublicKey,
    ) -> Instruction:
        return transfer_checked(source, mint, dest, authority, amount, decimals, token_program=TOKEN_2022_PROGRAM_KEY)


class TokenProgramVariant(Enum):
    """Selects the token program a client operates against.
    """

    # The original SPL token program.
    LEGACY = 1

    # The Token-2022 program.
    EXTENSIONS = 2

    def program(self) -> TokenProgram:
        if self == TokenProgramVariant.LEGACY:
            return LegacyTokenProgram()
        if self == TokenProgramVariant.EXTENSIONS:
            return ExtensionsTokenProgram()

        raise ValueError(f'unknown token program variant {self}')
