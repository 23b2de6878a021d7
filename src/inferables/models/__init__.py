"""Inference result models.

A candidate-confirmation protocol with no domain logic of its own:

    Guess / GuessList  --confirm()-->  Actual
    Guess              --decline()-->  Unsolvable
    GuessList          --decline()-->  GuessList (one fewer) | Unsolvable

Actual and Unsolvable are terminal and have no transitions. Every
transition returns a new instance.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from inferables.lib.errors import ConstraintViolation
from inferables.lib.variant import Variant, variant

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

logger = logging.getLogger(__name__)


@variant()
@dataclass(frozen=True, slots=True)
class Actual(Variant[T]):
    """A confirmed, final result."""


@variant()
@dataclass(frozen=True, slots=True)
class Unsolvable(Variant[None]):
    """No candidate could be confirmed."""

    value: None = field(default=None, init=False, repr=False)


class Guessable(Protocol[T_co]):
    """Unconfirmed state that can be confirmed or declined."""

    def confirm(self) -> Actual[T_co]: ...

    def decline(self) -> "Unsolvable | GuessList[T_co]": ...


@variant()
@dataclass(frozen=True, slots=True)
class Guess(Variant[T]):
    """A single unconfirmed candidate."""

    def confirm(self) -> Actual[T]:
        logger.debug(f"Confirmed guess {self.value!r}")
        return Actual(self.value)

    def decline(self) -> Unsolvable:
        logger.debug(f"Declined guess {self.value!r}, no candidates remain")
        return Unsolvable()


@variant("Guesses", fallback="Guess")
@dataclass(frozen=True, slots=True)
class GuessList(Variant[T]):
    """Unconfirmed candidates, most preferred first.

    Built from any non-empty iterable; value is the first candidate.
    Dispatches as "Guesses", falling back to a "Guess" handler.
    """

    value: T = field(init=False, repr=False)
    values: tuple[T, ...]

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if not values:
            raise ConstraintViolation("GuessList requires at least one candidate")
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "value", values[0])

    @property
    def remaining(self) -> int:
        """Number of candidates not yet declined."""
        return len(self.values)

    def confirm(self) -> Actual[T]:
        logger.debug(f"Confirmed candidate {self.value!r} of {self.remaining}")
        return Actual(self.value)

    def decline(self) -> "Unsolvable | GuessList[T]":
        if len(self.values) < 2:
            logger.debug(f"Declined last candidate {self.value!r}")
            return Unsolvable()
        logger.debug(f"Declined candidate {self.value!r}, {self.remaining - 1} remain")
        return GuessList(self.values[1:])


type Inference[T] = Actual[T] | Guess[T] | GuessList[T] | Unsolvable

# Handler keys recognised by matches_with for this family
MATCH_LOOKUP: dict[str, type] = {
    "Actual": Actual,
    "Guess": Guess,
    "Guesses": GuessList,
    "Unsolvable": Unsolvable,
}


def from_candidates(candidates: Iterable[T]) -> Inference[T]:
    """Seed an inference from candidates in preference order.

    No candidates gives Unsolvable, one gives a Guess, more give a GuessList.
    """
    values = tuple(candidates)
    match values:
        case ():
            return Unsolvable()
        case (single,):
            return Guess(single)
        case _:
            return GuessList(values)


def is_guess_like(value: object) -> bool:
    """Check if value is a Guess or a GuessList."""
    return Guess.is_(value) or GuessList.is_(value)


def is_terminal(value: object) -> bool:
    """Check if value is Actual or Unsolvable."""
    return Actual.is_(value) or Unsolvable.is_(value)


__all__ = [
    "MATCH_LOOKUP",
    "Actual",
    "Guess",
    "GuessList",
    "Guessable",
    "Inference",
    "Unsolvable",
    "from_candidates",
    "is_guess_like",
    "is_terminal",
]
