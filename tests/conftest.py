"""Shared fixtures for torrent-notifier tests."""

import json

import pytest

from torrent_notifier.logging.context import clear_log_context


@pytest.fixture
def settings_dict():
    """Valid settings document in the download manager's hyphenated spelling."""
    return {
        "download-dir": "/var/lib/transmission/downloads",
        "rpc-enabled": True,
        "rpc-bind-address": "127.0.0.1",
        "rpc-port": 9091,
        "rpc-authentication-required": True,
        "rpc-url": "/transmission/",
        "rpc-username": "transmission",
        "rpc-plain-password": "secret",
    }


@pytest.fixture
def write_settings(tmp_path):
    """Write a settings document to a temporary file and return its path."""

    def _write(document, name="settings.json"):
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables read by load_environment_config()."""
    for name in (
        "SMTP_HOST",
        "SMTP_PORT",
        "SMTP_USE_TLS",
        "SMTP_USER",
        "SMTP_PASS",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def clean_log_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()
