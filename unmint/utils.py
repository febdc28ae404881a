import decimal
from typing import Union

LAMPORTS_PER_SOL = 10 ** 9
SOL_DECIMALS = 9

Amount = Union[str, int, float, decimal.Decimal]


def to_base_units(amount: Amount, decimals: int) -> int:
    """Converts a decimal token amount to an integer amount in the smallest unit of a mint with the provided number
    of decimals. Any precision beyond `decimals` is truncated toward zero.

    For example, an amount of "1.5" with 6 decimals results in 1500000, and "0.0000009" with 6 decimals results in 0.

    Floats are converted through their shortest string representation, so 1.1 is treated as "1.1" rather than its
    binary approximation.

    :param amount: A decimal amount. Must not be negative.
    :param decimals: The number of decimals of the mint.
    :return: An integer amount.
    """
    if decimals < 0:
        raise ValueError('decimals must not be negative')

    if isinstance(amount, float):
        amount = repr(amount)

    try:
        value = decimal.Decimal(amount)
    except decimal.InvalidOperation as e:
        raise ValueError(f'invalid amount: {amount!r}') from e

    if not value.is_finite():
        raise ValueError(f'invalid amount: {amount!r}')
    if value < 0:
        raise ValueError('amount must not be negative')

    scaled = value.scaleb(decimals, context=decimal.Context(prec=max(len(value.as_tuple().digits) + decimals, 1)))
    return int(scaled.to_integral_value(rounding=decimal.ROUND_DOWN))


def from_base_units(quarks: int, decimals: int) -> str:
    """Converts an integer amount in the smallest unit of a mint into a decimal string.

    :param quarks: An amount, in the smallest unit.
    :param decimals: The number of decimals of the mint.
    :return: A string decimal amount.
    """
    if quarks == 0:
        return '0'

    return str(decimal.Decimal(quarks) / (10 ** decimals))


def sol_to_lamports(sol: Amount) -> int:
    return to_base_units(sol, SOL_DECIMALS)


def lamports_to_sol(lamports: int) -> str:
    return from_base_units(lamports, SOL_DECIMALS)
