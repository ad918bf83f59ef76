"""
tests/ui/conftest.py — pytest configuration for the browser suites.

Markers:
    @pytest.mark.smoke       view bootstraps against the stubbed backend
    @pytest.mark.regression  full sequence-view behaviour
    @pytest.mark.sanity      the handful worth running on every change

UITestCase owns the browser (setUpClass/tearDownClass) and skips its class
when Chromium is missing; this file only handles a missing playwright
package for the smoke/ and regression/ directories.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import BRIDGE_BASE_URL, BRIDGE_TEST_ID_ATTRIBUTE, UI_HEADLESS, UI_TIMEOUT_MS

_BROWSER_SUITES = {"smoke", "regression"}


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "smoke: sequence view renders from stubs")
    config.addinivalue_line("markers", "regression: sequence view behaviour, filters and details")
    config.addinivalue_line("markers", "sanity: critical sanity check tests")


def pytest_report_header(config: pytest.Config) -> str:
    return (
        f"bridge: {BRIDGE_BASE_URL} (test ids: {BRIDGE_TEST_ID_ATTRIBUTE}), "
        f"headless={UI_HEADLESS}, timeout={UI_TIMEOUT_MS}ms"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip the browser suites when playwright is not importable."""
    try:
        import playwright  # noqa: F401
    except ImportError:
        skip = pytest.mark.skip(reason="playwright not installed — run: pip install -e .[test]")
        for item in items:
            if _BROWSER_SUITES & set(Path(str(item.fspath)).parts):
                item.add_marker(skip)
