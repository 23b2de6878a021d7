"""Maybe type: a value that is either present (Some) or absent (Nothing).

matches_with returns a Maybe, so handler results are read back with
pattern matching or unwrap_or:

    match state.matches_with({"Actual": lambda s: s.value}):
        case Some(value):
            # a handler ran
        case Nothing():
            # no handler for this variant
"""

from dataclasses import dataclass, field
from typing import TypeVar

from inferables.lib.variant import Variant, variant

T = TypeVar("T")


@variant()
@dataclass(frozen=True, slots=True)
class Some(Variant[T]):
    """Present value."""


@variant()
@dataclass(frozen=True, slots=True)
class Nothing(Variant[None]):
    """Absent value."""

    value: None = field(default=None, init=False, repr=False)


type Maybe[T] = Some[T] | Nothing


def maybe(value: T | None) -> Maybe[T]:
    """Wrap value in Some, or return Nothing for None."""
    if value is None:
        return Nothing()
    return Some(value)


def is_some(m: Maybe[T]) -> bool:
    """Check if m holds a value."""
    return isinstance(m, Some)


def is_nothing(m: Maybe[T]) -> bool:
    """Check if m is empty."""
    return isinstance(m, Nothing)


def unwrap_or(m: Maybe[T], default: T) -> T:
    """Extract the value from Some, or return default for Nothing."""
    match m:
        case Some(value):
            return value
        case _:
            return default
