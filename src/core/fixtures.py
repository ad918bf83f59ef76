"""
core/fixtures.py — Fixture-file loader for stubbed backend responses.

Fixture names follow the Cypress convention used by the bridge suite:
``metadata.mock`` resolves to ``metadata.mock.json``; a name that already
ends in ``.json`` is taken as is.

Fixtures are read-only, so each file is parsed once per process.
"""

import json
from pathlib import Path
from typing import Any

from core.config import BRIDGE_FIXTURES_DIR
from core.logger import LOGGER

__all__ = [
    "Error", "FixtureNotFoundError", "FixtureFormatError",
    "fixture_path", "load_fixture", "clear_cache",
]


class Error(Exception):
    """Base class for exceptions raised by this module."""

    pass


class FixtureNotFoundError(Error, FileNotFoundError):
    """Raised when a fixture name does not resolve to a file."""

    pass


class FixtureFormatError(Error, ValueError):
    """Raised when a fixture file is not valid JSON."""

    pass


_CACHE: dict[Path, Any] = {}


def fixture_path(name: str, base_dir: Path = BRIDGE_FIXTURES_DIR) -> Path:
    """Return the file a fixture name refers to (existence not checked)."""
    filename = name if name.endswith(".json") else f"{name}.json"
    return Path(base_dir) / filename


def load_fixture(name: str, base_dir: Path = BRIDGE_FIXTURES_DIR) -> Any:
    """Load and parse a fixture, caching the result per resolved path."""
    path = fixture_path(name, base_dir)
    if path in _CACHE:
        return _CACHE[path]

    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as exc:
        raise FixtureNotFoundError(f"fixture {name!r} not found at {path}") from exc
    except json.JSONDecodeError as exc:
        raise FixtureFormatError(f"fixture {name!r} at {path} is not valid JSON: {exc}") from exc

    LOGGER.debug("loaded fixture %s", path.name)
    _CACHE[path] = data
    return data


def clear_cache() -> None:
    _CACHE.clear()
