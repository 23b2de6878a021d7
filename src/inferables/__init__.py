"""Inferables - algebraic container types with name-keyed dispatch.

Maybe (Some/Nothing), Either (Left/Right) and the inference result family
(Actual/Guess/GuessList/Unsolvable) all share matches_with.
"""

__version__ = "0.1.0"

from inferables.lib.either import Either, Left, Right, is_left, is_right
from inferables.lib.errors import ConstraintViolation
from inferables.lib.maybe import Maybe, Nothing, Some, is_nothing, is_some, maybe, unwrap_or
from inferables.lib.variant import VARIANTS, Variant, matches_with, variant, variant_name
from inferables.models import (
    MATCH_LOOKUP,
    Actual,
    Guess,
    Guessable,
    GuessList,
    Inference,
    Unsolvable,
    from_candidates,
    is_guess_like,
    is_terminal,
)

__all__ = [
    "MATCH_LOOKUP",
    "VARIANTS",
    "Actual",
    "ConstraintViolation",
    "Either",
    "Guess",
    "GuessList",
    "Guessable",
    "Inference",
    "Left",
    "Maybe",
    "Nothing",
    "Right",
    "Some",
    "Unsolvable",
    "Variant",
    "from_candidates",
    "is_guess_like",
    "is_left",
    "is_nothing",
    "is_right",
    "is_some",
    "is_terminal",
    "matches_with",
    "maybe",
    "unwrap_or",
    "variant",
    "variant_name",
]
