"""Either type: a two-branch tagged union.

Left and Right carry no meaning beyond their name. Callers decide which
branch is which.
"""

from dataclasses import dataclass
from typing import TypeVar

from inferables.lib.variant import Variant, variant

T = TypeVar("T")


@variant()
@dataclass(frozen=True, slots=True)
class Left(Variant[T]):
    """Left branch."""


@variant()
@dataclass(frozen=True, slots=True)
class Right(Variant[T]):
    """Right branch."""


type Either[T] = Left[T] | Right[T]


def is_left(e: Either[T]) -> bool:
    """Check if e is Left."""
    return isinstance(e, Left)


def is_right(e: Either[T]) -> bool:
    """Check if e is Right."""
    return isinstance(e, Right)
