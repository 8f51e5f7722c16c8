"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

ADDITION = "bar"
_I32_MAX = 2**31 - 1


def calculate_price_of_apples(apple_quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if apple_quantity < 41:
        return apple_quantity * 2
    return apple_quantity


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" count times."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("append count must not be negative")


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output: list[str] = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(count=count):
                # Counts that do not fit a 32-bit signed integer are dropped.
                if count <= _I32_MAX:
                    output.append(text + ADDITION * count)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A report card with a grade of any printable kind."""

    grade: Any
    student_name: str
    student_age: int

    def report(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"