"""Shared CLI utilities.

Common options, error handling, output formatting.
"""

import json
import sys
from collections.abc import Callable
from dataclasses import asdict
from typing import Any, ParamSpec, TypeVar

import click

from inferables.lib.errors import ConstraintViolation
from inferables.lib.maybe import unwrap_or
from inferables.lib.variant import Variant, variant_name

# Default values
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENVVAR = "INFER_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Type variables for decorators
P = ParamSpec("P")
T = TypeVar("T")


def json_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --json flag for JSON output."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Output as JSON",
    )(fn)


def log_level_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --log-level option, also read from INFER_LOG_LEVEL."""
    return click.option(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        envvar=LOG_LEVEL_ENVVAR,
        show_default=True,
        show_envvar=True,
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        help="Logging verbosity",
    )(fn)


def handle_error(error: Any) -> None:
    """Print error message and exit."""
    message = _format_error(error)
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _format_error(error: Any) -> str:
    """Format error for display."""
    match error:
        case ConstraintViolation():
            return f"Invalid input: {error}"

        case _:
            return str(error)


def describe(state: Variant[Any]) -> str:
    """One-line human readable rendering of a variant."""
    shown = state.matches_with(
        {
            "Actual": lambda s: f"Actual: {s.value}",
            "Guess": lambda s: f"Guess: {s.value}",
            "Guesses": lambda s: f"Guesses: {', '.join(str(v) for v in s.values)}",
            "Unsolvable": lambda s: "Unsolvable: no candidate was confirmed",
        }
    )
    return unwrap_or(shown, f"{variant_name(state)}: {state.value}")


def to_json(obj: Any) -> str:
    """Convert object to JSON string."""
    return json.dumps(_to_serializable(obj), indent=2)


def _to_serializable(obj: Any) -> Any:
    """Convert object to JSON-serializable form."""
    if obj is None:
        return None
    if isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, dict):
        return {k: _to_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_serializable(v) for v in obj]
    if isinstance(obj, Variant):
        return {"variant": variant_name(obj), **_to_serializable(asdict(obj))}
    return str(obj)
