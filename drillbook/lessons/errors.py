"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width with strict decimal syntax."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _SIGNED_DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    if number > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if number < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return number


def generate_nametag_text(name: str) -> str:
    """Return the name tag text, refusing empty names."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    quantity = _parse_int(item_quantity, 32)
    product = quantity * COST_PER_ITEM
    if not _I32_MIN <= product <= _I32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    cost = product + PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("attempt to add with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """Base class for values that cannot become a PositiveNonzeroInteger."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self, message: str = "number is negative"):
        super().__init__(message)


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self, message: str = "number is zero"):
        super().__init__(message)


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a PositiveNonzeroInteger; see cause."""

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger, raising ParsePosNonzeroError."""
    try:
        number = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err