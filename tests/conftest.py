"""Pytest configuration.

Goal: make `import radixconv` work when running tests without installing the
package (editable install).

This repo uses a flat layout (radixconv/ at repo root). When pytest runs from a
working directory where repo root isn't on sys.path, the import fails with
`ModuleNotFoundError: radixconv`.

This conftest ensures repo root is on sys.path.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


@pytest.fixture(params=range(2, 37), ids=lambda b: f"base{b}")
def base(request: pytest.FixtureRequest) -> int:
    return request.param
