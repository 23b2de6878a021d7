"""Commands layer - CLI facade over workflows."""

from inferables.commands.resolve import resolve, walk

__all__ = [
    "resolve",
    "walk",
]
