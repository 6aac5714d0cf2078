"""
Human-friendly formatting of amounts for display.

.. autofunction:: format_amount

Which is in turn implemented using:

.. autofunction:: format_number

.. autofunction:: format_decimal

.. autofunction:: format_fraction
"""

from typing import FrozenSet, Union

from fractions import Fraction

from recipemd.recipe import Amount


__all__ = [
    "format_decimal",
    "format_fraction",
    "format_number",
    "format_amount",
]


def format_decimal(number: Union[float, Fraction], significant_figures: int = 3) -> str:
    """
    Format a number as a decimal, showing up to ``significant_figures``
    digits after the decimal point. Each digit before the decimal point
    reduces the number of digits shown after it, though digits before the
    decimal point are never dropped.

    Trailing zeros (and a trailing decimal point) are removed.
    """
    integer_digits = len(str(abs(int(number))).lstrip("0"))
    decimal_places = max(0, significant_figures - integer_digits)
    formatted = f"{float(number):.{decimal_places}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("-0", ""):
        formatted = "0"
    return formatted


def format_fraction(
    number: Fraction,
    allowed_denominators: FrozenSet[int] = frozenset([2, 3, 4, 8]),
) -> str:
    """
    Format a :py:class:`~fractions.Fraction` as '3/4' or, for improper
    fractions, '1 3/4'.

    Fractions whose denominator is not in ``allowed_denominators`` are shown
    as decimals instead (see :py:func:`format_decimal`).
    """
    if number.denominator == 1:
        return str(number.numerator)
    if number.denominator not in allowed_denominators:
        return format_decimal(number)

    integer_part, remainder = divmod(abs(number.numerator), number.denominator)
    sign = "-" if number < 0 else ""
    if integer_part:
        return f"{sign}{integer_part} {remainder}/{number.denominator}"
    return f"{sign}{remainder}/{number.denominator}"


def format_number(number: Union[int, float, Fraction]) -> str:
    """
    Format a number in a human-friendly way: as a fraction when sensible,
    otherwise as a decimal.
    """
    if isinstance(number, float):
        return format_decimal(number)
    return format_fraction(Fraction(number))


def format_amount(amount: Amount) -> str:
    """
    Format an amount for display, e.g. "1 1/2 cups", "4" or "a pinch".
    """
    if amount.factor is None:
        return amount.unit or ""
    if amount.unit is None:
        return format_number(amount.factor)
    return f"{format_number(amount.factor)} {amount.unit}"
