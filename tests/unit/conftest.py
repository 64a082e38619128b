"""
Pytest configuration for unit tests.

Provides fixtures and environment isolation that apply to all unit tests.
"""

from pathlib import Path

import pytest


FIXTURES_DIR = Path(__file__).parent.parent / 'fixtures'


@pytest.fixture
def sample_page_path():
    """Path to the saved transactions page fixture."""
    return FIXTURES_DIR / 'transactions.html'


@pytest.fixture(autouse=True)
def isolate_app_config(monkeypatch, tmp_path):
    """
    Keep tests independent of the developer's environment.

    Clears settings env vars, runs from an empty directory (no .env),
    and drops the cached config before and after each test.
    """
    from txn_html_extract.config import reset_app_config

    for key in ('LOG_LEVEL', 'INPUT_ENCODING', 'OUTPUT_ENCODING'):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)

    reset_app_config()
    yield
    reset_app_config()
