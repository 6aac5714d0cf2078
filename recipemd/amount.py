"""
Parsing of free-text amounts such as "1 1/2 cups", "⅚" or "a pinch".

.. autofunction:: parse_amount

.. autofunction:: parse_factor

.. autofunction:: split_list
"""

from typing import Callable, List, Match, Pattern, Tuple

import re

from fractions import Fraction

from recipemd.recipe import Amount


UNICODE_FRACTIONS = {
    # Latin-1 supplement
    "¼": Fraction(1, 4),
    "½": Fraction(1, 2),
    "¾": Fraction(3, 4),
    # Number forms
    "⅐": Fraction(1, 7),
    "⅑": Fraction(1, 9),
    "⅒": Fraction(1, 10),
    "⅓": Fraction(1, 3),
    "⅔": Fraction(2, 3),
    "⅕": Fraction(1, 5),
    "⅖": Fraction(2, 5),
    "⅗": Fraction(3, 5),
    "⅘": Fraction(4, 5),
    "⅙": Fraction(1, 6),
    "⅚": Fraction(5, 6),
    "⅛": Fraction(1, 8),
    "⅜": Fraction(3, 8),
    "⅝": Fraction(5, 8),
    "⅞": Fraction(7, 8),
}
"""Exact values of the unicode vulgar fraction characters."""

_vulgar = r"([¼-¾⅐-⅞])"

_unit = r"\s*(?P<unit>.*)"

VALUE_FORMATS: List[Tuple[Pattern[str], Callable[[Match[str]], Fraction]]] = [
    # Improper fraction (1 1/2)
    (
        re.compile(r"([0-9]+)\s+([0-9]+)\s*/\s*([0-9]*[1-9][0-9]*)" + _unit),
        lambda m: int(m[1]) + Fraction(int(m[2]), int(m[3])),
    ),
    # Improper fraction with a vulgar fraction (1 ½)
    (
        re.compile(r"([0-9]+)\s+" + _vulgar + _unit),
        lambda m: int(m[1]) + UNICODE_FRACTIONS[m[2]],
    ),
    # Proper fraction (5/6)
    (
        re.compile(r"([0-9]+)\s*/\s*([0-9]*[1-9][0-9]*)" + _unit),
        lambda m: Fraction(int(m[1]), int(m[2])),
    ),
    # Vulgar fraction (⅚)
    (re.compile(_vulgar + _unit), lambda m: UNICODE_FRACTIONS[m[1]]),
    # Decimal (5,4 or 5.6)
    (
        re.compile(r"([0-9]*)[.,]([0-9]+)" + _unit),
        lambda m: Fraction(f"{m[1] or 0}.{m[2]}"),
    ),
    # Integer (4)
    (re.compile(r"([0-9]+)" + _unit), lambda m: Fraction(int(m[1]))),
]
"""
The supported number formats, in priority order. Each pattern must match a
whole (trimmed) amount and captures any text following the number in the
'unit' group.
"""

list_split_pattern = re.compile(r"(?<![0-9]),|,(?![0-9])")
"""Matches commas, except those between two digits (e.g. in '1,5')."""


def parse_amount(text: str) -> Amount:
    """
    Parse an amount, e.g. "1 1/2 cups" or "200 g". Never fails: text which
    doesn't start with a number becomes the unit of an amount without a
    factor.

    Negative numbers are not supported.
    """
    text = text.strip()
    for pattern, factor_function in VALUE_FORMATS:
        match = pattern.fullmatch(text)
        if match is not None:
            unit = match["unit"].strip()
            return Amount(factor_function(match), unit or None)
    return Amount(None, text)


def parse_factor(text: str) -> Fraction:
    """
    Parse a plain number (e.g. "2", "1/2" or "1,5"). Throws a
    :py:exc:`ValueError` if the text isn't just a number.
    """
    amount = parse_amount(text)
    if amount.factor is None or amount.unit is not None:
        raise ValueError(f"not a number: {text!r}")
    return amount.factor


def split_list(text: str) -> List[str]:
    """
    Split a comma separated list (of tags or yields). Commas with a digit on
    either side are not treated as separators so that amounts such as '1,5
    cups' survive.
    """
    return list_split_pattern.split(text)
