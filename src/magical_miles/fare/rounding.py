"""Rounding rules shared by every fare figure.

Amounts are rounded half-up on the scaled value, the same way the web
front-end rounds (``Math.round(x * 100) / 100``), so a fare computed here and
one recomputed in the browser always agree to the cent.
"""

import math

CURRENCY_UNIT = 0.01


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_currency(value: float) -> float:
    """Round an amount to two decimal places."""
    return math.floor(value * 100 + 0.5) / 100
