"""Variant base class and name-keyed dispatch.

Every sum type in this package is a family of frozen dataclasses deriving
from Variant. Concrete variants register a dispatch name with @variant, and
matches_with routes a value to the handler stored under that name:

    shown = state.matches_with({
        "Actual": lambda s: f"confirmed {s.value}",
        "Guesses": lambda s: f"{len(s.values)} candidates",
        None: lambda s: "something else",  # catch-all, "None" also works
    })

The outcome is Some(handler_result), or Nothing() when no handler applies.
A missing handler is not an error.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from inferables.lib.maybe import Nothing, Some

T = TypeVar("T")
R = TypeVar("R")
C = TypeVar("C", bound=type)

logger = logging.getLogger(__name__)

# Handler maps are keyed by dispatch name; None (or "None") is the catch-all.
type HandlerMap[R] = Mapping[str | None, Callable[[Any], R]]

_REGISTRY: dict[str, type] = {}
_NAMES: dict[type, str] = {}
_FALLBACKS: dict[type, str] = {}

VARIANTS: Mapping[str, type] = MappingProxyType(_REGISTRY)


def variant(name: str | None = None, *, fallback: str | None = None) -> Callable[[C], C]:
    """Register a concrete variant class under a dispatch name.

    Apply it above @dataclass so the final (slotted) class is registered.

    Args:
        name: Handler key for this variant. Defaults to the class name.
        fallback: Handler key to try when a map has no entry for name.
    """

    def register(cls: C) -> C:
        key = name or cls.__name__
        if key == "None":
            raise ValueError("'None' is reserved for catch-all handlers")
        existing = _REGISTRY.get(key)
        if existing is not None and existing is not cls:
            raise ValueError(
                f"Variant name '{key}' is already registered to {existing.__qualname__}"
            )
        _REGISTRY[key] = cls
        _NAMES[cls] = key
        if fallback is not None:
            _FALLBACKS[cls] = fallback
        return cls

    return register


def variant_name(value: object) -> str:
    """Dispatch name of a value (or class), from its exact runtime class."""
    cls = value if isinstance(value, type) else type(value)
    return _NAMES.get(cls, cls.__name__)


@dataclass(frozen=True, slots=True)
class Variant(Generic[T]):
    """Immutable holder for a single payload."""

    value: T

    @classmethod
    def is_(cls, value: object) -> bool:
        """Check if value is an instance of this variant (or a subclass)."""
        return isinstance(value, cls)

    def matches_with(self, handlers: HandlerMap[R]) -> "Some[R] | Nothing":
        """Dispatch this value to the handler for its variant."""
        return matches_with(self, handlers)


def matches_with(value: object, handlers: HandlerMap[R]) -> "Some[R] | Nothing":
    """Invoke the handler registered for value's variant.

    Lookup order: exact dispatch name, the variant's fallback name, then the
    catch-all (the None key, or the string "None"). Values that are not
    variants always give Nothing().
    """
    # maybe.py subclasses Variant, so it can only be imported once this module has loaded
    from inferables.lib.maybe import Nothing, Some

    if not isinstance(value, Variant):
        return Nothing()

    cls = type(value)
    name = _NAMES.get(cls, cls.__name__)
    handler = handlers.get(name)
    if handler is None and cls in _FALLBACKS:
        handler = handlers.get(_FALLBACKS[cls])
    if handler is None:
        handler = handlers.get(None)
    if handler is None:
        handler = handlers.get("None")
    if handler is None:
        logger.debug(f"No handler for variant '{name}'")
        return Nothing()

    return Some(handler(value))
