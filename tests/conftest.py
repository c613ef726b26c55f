"""Suite markers and environment gates shared by every test directory."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

SUITES = ("e2e_tests", "integration_tests", "unit_tests")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark tests by suite directory; skip e2e tests without the console script."""
    del config
    console_script = shutil.which("ffheic")
    for item in items:
        parts = Path(str(item.fspath)).parts
        suite = next((name for name in SUITES if name in parts), None)
        if suite is None:
            continue
        item.add_marker(getattr(pytest.mark, suite.removesuffix("_tests")))
        if suite == "e2e_tests" and console_script is None:
            item.add_marker(pytest.mark.skip(reason="ffheic console script not installed"))
