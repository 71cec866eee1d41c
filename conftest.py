import os
import sys
from pathlib import Path

import pytest

# Ensure 'src' directory is on sys.path for tests
PROJECT_ROOT = Path(__file__).resolve().parent
SRC_DIR = PROJECT_ROOT / "src"
if SRC_DIR.exists() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def environ(monkeypatch):
    """Give the test a private copy of ``os.environ``.

    ``.env`` loading writes straight into the process environment; the copy
    keeps those writes from leaking into other tests.
    """
    env = dict(os.environ)
    monkeypatch.setattr(os, "environ", env)
    return env
