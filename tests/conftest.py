"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from result_combinators.settings import reset_settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _reset_message_settings() -> Generator[None]:
    """Restore default message settings around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all RESULT__ env vars so config tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("RESULT__"):
            monkeypatch.delenv(key)
