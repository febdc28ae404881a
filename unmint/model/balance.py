from typing import Optional


class TokenBalance:
    """The balance of a token account.

    :param amount: The raw balance, in the smallest unit of the mint, as an integer string.
    :param decimals: The number of decimals configured on the mint.
    :param ui_amount: (optional) The balance as a float, as reported by the node.
    :param ui_amount_string: The balance as a decimal string.
    """

    def __init__(self, amount: str, decimals: int, ui_amount: Optional[float] = None, ui_amount_string: str = ''):
        self.amount = amount
        self.decimals = decimals
        self.ui_amount = ui_amount
        self.ui_amount_string = ui_amount_string

    def __eq__(self, other):
        if not isinstance(other, TokenBalance):
            return False

        return (self.amount == other.amount and
                self.decimals == other.decimals and
                self.ui_amount == other.ui_amount and
                self.ui_amount_string == other.ui_amount_string)

    def __repr__(self):
        return f'{self.__class__.__name__}(' \
               f'amount={self.amount!r}, decimals={self.decimals}, ui_amount={self.ui_amount}, ' \
               f'ui_amount_string={self.ui_amount_string!r})'

    @property
    def quarks(self) -> int:
        """Returns the raw balance as an integer.
        """
        return int(self.amount)

    @classmethod
    def from_ui_token_amount(cls, ui_token_amount) -> 'TokenBalance':
        """Creates a TokenBalance from a :class:`solders.account_decoder.UiTokenAmount`.
        """
        return cls(
            ui_token_amount.amount,
            ui_token_amount.decimals,
            ui_token_amount.ui_amount,
            ui_token_amount.ui_amount_string,
        )
