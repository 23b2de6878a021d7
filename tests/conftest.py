"""Shared pytest fixtures for inferables tests."""

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner


class HandlerSpy:
    """Builds handlers that record which variant keys were invoked."""

    def __init__(self) -> None:
        self.calls: list[tuple[str | None, Any]] = []

    def handler(self, key: str | None, result: Any = None) -> Callable[[Any], Any]:
        def record(value: Any) -> Any:
            self.calls.append((key, value))
            return key if result is None else result

        return record

    def handlers(self, *keys: str | None) -> dict[str | None, Callable[[Any], Any]]:
        return {key: self.handler(key) for key in keys}

    @property
    def called(self) -> list[str | None]:
        return [key for key, _ in self.calls]


@pytest.fixture
def spy() -> HandlerSpy:
    """Fresh handler spy per test."""
    return HandlerSpy()


@pytest.fixture
def runner() -> CliRunner:
    """Click test runner."""
    return CliRunner()
