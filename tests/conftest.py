"""Global pytest fixtures and default marks for PODARCHIVER tests.

Tests get a default mark from the top-level directory they live in
(`tests/unit/` → `unit`, `tests/contract/` → `contract`, `tests/e2e/` →
`e2e`) unless they already carry that mark.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.feeds",
]

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKS = ("unit", "contract", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default directory mark to every collected test."""
    for item in items:
        try:
            top = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if top in DIRECTORY_MARKS and not any(
            marker.name == top for marker in item.iter_markers()
        ):
            item.add_marker(getattr(pytest.mark, top))
