"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from errors_with_context.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test starts from default settings, unaffected by the host environment."""
    for name in ("DEBUG_STYLE", "REQUIRE_TRANSFERABLE", "LOG_CHAIN_AS_TREE"):
        monkeypatch.delenv(f"ERRORS_WITH_CONTEXT_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()
