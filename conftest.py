"""
Root-level shared test fixtures.

Inherited by the vault and rotation test suites as well as tests/.
"""

from __future__ import annotations

import pytest

from credrotate.config import reset_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove credrotate env vars so tests see built-in defaults."""
    for key in [
        "CREDROTATE_OP_BIN",
        "CREDROTATE_VAULT",
        "CREDROTATE_DRY_RUN",
        "CREDROTATE_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
