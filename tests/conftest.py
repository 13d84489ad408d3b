"""Pytest configuration shared by all test modules."""

import shutil
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from hn_client.utils.config import reset_settings

HN_ENV_VARS = (
    "HN_SEARCH_BASE_URL",
    "HN_ITEM_API_BASE_URL",
    "HN_DEBUG",
    "HN_OBJ_DEBUG",
    "HN_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(scope="session", autouse=True)
def backup_env_file():
    """Backup .env file during test session to prevent pollution."""
    env_file = Path(".env")
    backup_file = Path(".env.test_backup")

    # Backup if exists
    if env_file.exists():
        shutil.copy(env_file, backup_file)
        env_file.unlink()

    yield

    # Restore
    if backup_file.exists():
        shutil.move(backup_file, env_file)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings."""
    for name in HN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def make_response(payload=None, status_code: int = 200, reason_phrase: str = "OK") -> MagicMock:
    """Build a stand-in for an httpx.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason_phrase
    response.is_success = 200 <= status_code < 300
    response.json = MagicMock(return_value=payload)
    return response


def make_envelope(hits: list, **overrides) -> dict:
    """Search response body around the given hits."""
    envelope = {
        "hits": hits,
        "hitsPerPage": 100,
        "nbHits": len(hits),
        "nbPages": 1 if hits else 0,
        "page": 0,
        "processingTimeMS": 3,
        "serverTimeMS": 5,
        "query": "",
        "params": "",
        "exhaustiveNbHits": True,
    }
    envelope.update(overrides)
    return envelope


@pytest.fixture
def mock_http(monkeypatch: pytest.MonkeyPatch):
    """Patch httpx.AsyncClient and return the mocked client instance.

    Set ``mock_http.get.return_value`` or ``side_effect`` to script responses.
    """
    mock_client = MagicMock()
    mock_instance = mock_client.return_value.__aenter__.return_value
    mock_client.return_value.__aexit__ = AsyncMock(return_value=False)
    mock_instance.get = AsyncMock()
    monkeypatch.setattr("httpx.AsyncClient", mock_client)
    mock_instance.client_class = mock_client
    return mock_instance


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def envelope_factory():
    return make_envelope
