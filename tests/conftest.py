"""Root test configuration: isolate tests from local config and env"""

import pytest
import structlog

from digestkit.config import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test from an empty directory with no DIGESTKIT_* env vars set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DIGESTKIT_{name.upper()}", raising=False)
    yield
    structlog.reset_defaults()
