"""Smart pointers: a cons list and a clone-on-write sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell; None marks the end of the list."""

    value: int
    next: Cons | None = None


def create_empty_list() -> Cons | None:
    """The empty list."""
    return None


def create_non_empty_list() -> Cons | None:
    """A list holding the single value 5."""
    return Cons(5, None)


class Cow:
    """A sequence that is borrowed until it has to be changed, then owned."""

    __slots__ = ("_values", "_owned")

    def __init__(self, values: Sequence[int], owned: bool):
        self._values = values
        self._owned = owned

    @classmethod
    def borrowed(cls, values: Sequence[int]) -> Cow:
        """Wrap data that belongs to someone else; it is copied before any change."""
        return cls(values, owned=False)

    @classmethod
    def owned(cls, values: Sequence[int]) -> Cow:
        """Take the data over; changes are made to it directly."""
        return cls(values if isinstance(values, list) else list(values), owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def is_borrowed(self) -> bool:
        return not self._owned

    @property
    def values(self) -> Sequence[int]:
        return self._values

    def to_mut(self) -> list[int]:
        """Return a mutable list, copying borrowed data first."""
        if not self._owned:
            self._values = list(self._values)
            self._owned = True
        return self._values  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._values)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if needed."""
    for index, value in enumerate(list(cow.values)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow