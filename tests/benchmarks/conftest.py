"""conftest.py for benchmarks.

Benchmarks run against default settings regardless of the host environment.
"""

from __future__ import annotations

import pytest

from errors_with_context.config import reset_settings


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("DEBUG_STYLE", "REQUIRE_TRANSFERABLE", "LOG_CHAIN_AS_TREE"):
        monkeypatch.delenv(f"ERRORS_WITH_CONTEXT_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()
