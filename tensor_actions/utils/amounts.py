"""Conversion between SOL display amounts and lamports."""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from tensor_actions.constants import LAMPORTS_PER_SOL
from tensor_actions.utils.errors import InvalidAmountError

_LAMPORTS = Decimal(LAMPORTS_PER_SOL)


def parse_sol_amount(raw_amount: str) -> Decimal:
    """Parse a SOL amount string.

    Negative and zero values are accepted; rejecting them is up to the
    transaction builder. Digit group separators ("1_000") are not.

    Raises:
        InvalidAmountError: If the text is not a finite decimal number
    """
    if isinstance(raw_amount, str) and "_" in raw_amount:
        raise InvalidAmountError(raw_amount)

    try:
        amount = Decimal(raw_amount.strip())
    except (InvalidOperation, AttributeError):
        raise InvalidAmountError(raw_amount)

    if not amount.is_finite():
        raise InvalidAmountError(raw_amount)
    return amount


def sol_to_lamports(raw_amount: Union[str, Decimal]) -> int:
    """Convert a SOL amount to lamports, rounding half-up to a whole lamport.

    Args:
        raw_amount: Amount in SOL, as text or Decimal

    Returns:
        Amount in lamports
    """
    amount = raw_amount if isinstance(raw_amount, Decimal) else parse_sol_amount(raw_amount)
    return int((amount * _LAMPORTS).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def lamports_to_sol(lamports: Union[int, str]) -> Decimal:
    """Convert lamports (int or integer string) to SOL."""
    return Decimal(int(lamports)) / _LAMPORTS


def format_token_amount(amount: Decimal) -> str:
    """Format a token amount for display.

    Whole amounts keep up to two decimals, amounts below one keep four
    significant digits. Trailing zeros are dropped and thousands are grouped.

    Examples:
        Decimal("1") -> "1"
        Decimal("1234.5678") -> "1,234.56"
        Decimal("0.000123456") -> "0.0001234"
    """
    if amount == 0:
        return "0"

    magnitude = abs(amount)
    if magnitude >= 1:
        quantum = Decimal("0.01")
    else:
        # Exponent of the first significant digit, e.g. -4 for 0.000123
        leading = magnitude.adjusted()
        quantum = Decimal(1).scaleb(leading - 3)

    rounded = amount.quantize(quantum, rounding=ROUND_DOWN)
    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
