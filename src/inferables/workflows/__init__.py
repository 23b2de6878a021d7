"""Workflows layer - loops over the confirm/decline protocol."""

from inferables.workflows.resolve import advance, resolve

__all__ = ["advance", "resolve"]
