"""Shared fixtures for text-to-sql-proxy tests."""

import os

import pytest

from text_to_sql_proxy.config.loader import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_proxy_env(monkeypatch):
    """Remove any TEXT_TO_SQL_PROXY_* variables inherited from the shell."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
