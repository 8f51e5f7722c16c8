"""Checked conversion of integer triples into RGB colours."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class IntoColorError(ValueError):
    """Base class for failed conversions into a Color."""


class ColorBadLenError(IntoColorError):
    """The sequence did not hold exactly three components."""


class IntConversionError(IntoColorError):
    """A component was outside the 0..=255 range."""


def _component(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"colour components must be integers, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise IntConversionError(f"component {value} is outside 0..=255")
    return value


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_components(cls, red: int, green: int, blue: int) -> Color:
        """Build a colour from three integers, raising IntConversionError if out of range."""
        return cls(red=_component(red), green=_component(green), blue=_component(blue))

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> Color:
        """Build a colour from a sequence that must hold exactly three integers."""
        if len(values) != 3:
            raise ColorBadLenError(f"expected 3 components, got {len(values)}")
        red, green, blue = values
        return cls.from_components(red, green, blue)