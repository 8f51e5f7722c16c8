"""Conversions: counting bytes and characters, averages and parsing people."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_U32_MAX = 2**32 - 1
_USIZE_MAX = 2**64 - 1
_UNSIGNED_DIGITS = re.compile(r"\+?[0-9]+")


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(arg)


def num_sq(value: int) -> int:
    """Square an unsigned 32-bit value."""
    result = value * value
    if not 0 <= result <= _U32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence."""
    if not values:
        return float("nan")
    return sum(values) / len(values)


def _parse_usize(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED_DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    if number > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return number


class ParsePersonError(ValueError):
    """Base class for failures to parse "name,age"."""


class EmptyInputError(ParsePersonError):
    """The input string was empty."""


class BadLenError(ParsePersonError):
    """The input did not have exactly two fields."""


class NoNameError(ParsePersonError):
    """The name field was empty."""


class InvalidAgeError(ParsePersonError):
    """The age field was not an unsigned integer."""

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        self.cause = cause


@dataclass
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Parse "name,age", falling back to the default person on any problem."""
        if not text:
            return cls.default()
        name, *rest = text.split(",")
        if not name or len(rest) != 1:
            return cls.default()
        try:
            age = _parse_usize(rest[0])
        except ValueError:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse "name,age", raising a ParsePersonError on any problem."""
        if not text:
            raise EmptyInputError("empty input")
        name, *rest = text.split(",")
        if not name:
            raise NoNameError("empty name")
        if len(rest) != 1:
            raise BadLenError("expected exactly two fields")
        try:
            age = _parse_usize(rest[0])
        except ValueError as err:
            raise InvalidAgeError(err) from err
        return cls(name=name, age=age)