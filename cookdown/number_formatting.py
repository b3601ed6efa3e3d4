"""
Concise formatting of ingredient amounts.

.. autofunction:: format_amount

Which is implemented by the following specialised functions

.. autofunction:: format_float

.. autofunction:: format_fraction
"""

from typing import Union

from fractions import Fraction

from decimal import Decimal

from cookdown.recipe import Amount


__all__ = [
    "format_float",
    "format_fraction",
    "format_amount",
]


def format_float(number: float) -> str:
    """
    Format a floating point value as a recipe author would have typed it.

    Whole numbers are shown without a decimal point (e.g. '2' rather than
    '2.0'), everything else is shown using the shortest decimal
    representation which round-trips (e.g. '0.1' rather than
    '0.1000000000000000055511151231257827').

    Scientific notation is never used (e.g. '0.00000015' rather than
    '1.5e-07').
    """
    if number.is_integer():
        return str(int(number))
    else:
        return f"{Decimal(repr(number)):f}"


def format_fraction(number: Union[int, Fraction]) -> str:
    """
    Format a :py:class:`~fractions.Fraction` in the style '3/4' or, for
    improper fractions, '1 3/4'.
    """
    if number.denominator == 1:  # Integer case
        return str(number.numerator)
    elif abs(number.numerator) > number.denominator:  # Improper fraction case
        numerator = number.numerator
        denominator = number.denominator

        sign = "-" if numerator < 0 else ""
        numerator = abs(numerator)

        integer_part = numerator // denominator
        numerator %= denominator

        return f"{sign}{integer_part} {numerator}/{denominator}"
    else:  # Ordinary fraction case
        return f"{number.numerator}/{number.denominator}"


def format_amount(amount: Amount) -> str:
    """
    Format an ingredient amount for display.

    Textual amounts (e.g. 'a pinch') are passed through unchanged.
    """
    if isinstance(amount, str):
        return amount
    elif isinstance(amount, float):
        return format_float(amount)
    else:
        return format_fraction(amount)
