"""Traits and generics: appending "Bar", licensing information and a wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def append_bar(value: str | list[str]) -> str | list[str]:
    """Append "Bar": to a string it is concatenated, to a list it is pushed."""
    if isinstance(value, str):
        return value + "Bar"
    if isinstance(value, list):
        value.append("Bar")
        return value
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T