"""Resolve workflow - drive an inference through confirm/decline to a terminal state."""

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from inferables.lib.errors import ConstraintViolation
from inferables.models import Actual, Guess, GuessList, Inference, Unsolvable, from_candidates

T = TypeVar("T")

logger = logging.getLogger(__name__)


def resolve(candidates: Iterable[T], accept: Callable[[T], bool]) -> Actual[T] | Unsolvable:
    """Offer candidates to accept() in order until one is confirmed.

    Args:
        candidates: Candidate values, most preferred first
        accept: Decides whether the current candidate is confirmed

    Returns:
        Actual wrapping the first accepted candidate, or Unsolvable if
        every candidate was declined (or there were none).
    """
    state: Inference[T] = from_candidates(candidates)

    while True:
        match state:
            case Actual() | Unsolvable():
                logger.info(f"Resolved to {state!r}")
                return state
            case Guess(value) | GuessList(value=value):
                state = state.confirm() if accept(value) else state.decline()


def advance(state: Inference[T], declines: int) -> Inference[T]:
    """Decline the current candidate up to `declines` times.

    Stops early once the state is terminal.
    """
    if declines < 0:
        raise ConstraintViolation(f"Cannot decline a negative number of times: {declines}")

    for _ in range(declines):
        match state:
            case Guess() | GuessList():
                state = state.decline()
            case _:
                break
    return state
