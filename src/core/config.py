"""
core/config.py — Centralised path constants and environment defaults.

All other modules import paths from here rather than computing them from
__file__.  This guarantees consistency regardless of where a module lives
in the source tree.

Usage::

    from core.config import BRIDGE_FIXTURES_DIR, UI_TIMEOUT_MS
"""

import os
from pathlib import Path

# ── Repository layout ──────────────────────────────────────────────────────────

SRC_DIR: Path = Path(__file__).parent.parent       # …/repo/src/
REPO_ROOT: Path = SRC_DIR.parent                   # …/repo/

TESTS_DIR: Path = REPO_ROOT / "tests"
UI_DIR: Path = TESTS_DIR / "ui"

# Canned backend responses (Cypress-style "fixtures")
FIXTURES_DIR: Path = UI_DIR / "fixtures"
BRIDGE_FIXTURES_DIR: Path = FIXTURES_DIR / "bridge"

# Runtime output produced by test runs (gitignored)
ARTIFACTS_DIR: Path = REPO_ROOT / "artifacts"
UI_LOG_DIR: Path = ARTIFACTS_DIR / "ui-logs"


# ── Env helpers ────────────────────────────────────────────────────────────────

_FALSY = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean env var; unset or empty means *default*."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw not in _FALSY


def env_int(name: str, default: int) -> int:
    """Read an integer env var, falling back to *default* on junk."""
    raw = os.environ.get(name, "").strip()
    try:
        return int(raw)
    except ValueError:
        return default


# ── Feature flags / defaults (overridable via env) ────────────────────────────

# The bridge is never reached for real: every request is routed to fixtures.
BRIDGE_BASE_URL: str = os.environ.get("BRIDGE_BASE_URL", "http://bridge.test").rstrip("/")

UI_HEADLESS: bool = env_flag("UI_HEADLESS", True)

# Cypress' defaultCommandTimeout
UI_TIMEOUT_MS: int = env_int("UI_TIMEOUT_MS", 4_000)

BRIDGE_TEST_ID_ATTRIBUTE: str = os.environ.get("BRIDGE_TEST_ID_ATTRIBUTE", "uitestid")

# Console verbosity; per-test log files always capture DEBUG
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_level = os.environ.get("UI_LOG_LEVEL", "").strip().upper()
UI_LOG_LEVEL: str = _level if _level in _LOG_LEVELS else "INFO"
