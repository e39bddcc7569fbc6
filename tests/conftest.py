"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import csvtable' and
'import actions...' work without installing the package.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test with default settings, unaffected by the caller's environment."""
    for var in (
        "CSVTABLE_DATA_DIR",
        "CSVTABLE_ENCODING",
        "CSVTABLE_FILE_SUFFIX",
        "CSVTABLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()
