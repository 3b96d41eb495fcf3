"""
Root conftest.py — isolates UNICODE_TRUNCATE_* settings and registers custom markers.

Markers:
  @pytest.mark.slow   — scans very large inputs; skipped unless SLOW_TESTS=1 or --slow
"""
from __future__ import annotations

import os

import pytest

from unicode_truncate import TruncatePolicy
from unicode_truncate.policy import ENV_AMBIGUOUS_WIDTH, ENV_GRANULARITY, ENV_UNDEFINED_WIDTH


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolate_policy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Shell settings must not change widths seen by the tests."""
    for name in (ENV_GRANULARITY, ENV_UNDEFINED_WIDTH, ENV_AMBIGUOUS_WIDTH):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def grapheme_policy() -> TruncatePolicy:
    return TruncatePolicy()


@pytest.fixture
def codepoint_policy() -> TruncatePolicy:
    return TruncatePolicy(granularity="codepoint")


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "slow: mark test as scanning very large inputs (run with SLOW_TESTS=1 or --slow flag)",
    )


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.slow",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.slow tests unless --slow flag or SLOW_TESTS=1 is set."""
    run_slow = config.getoption("--slow") or os.environ.get("SLOW_TESTS", "").lower() in ("1", "true", "yes")
    skip_slow = pytest.mark.skip(reason="Large input test — run with --slow or SLOW_TESTS=1")
    for item in items:
        if "slow" in item.keywords and not run_slow:
            item.add_marker(skip_slow)
