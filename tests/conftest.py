"""Pytest configuration and fixtures for safefilename tests."""

from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def mock_settings():
    """Mock settings for testing without reading the environment."""
    settings = MagicMock()
    settings.extended = True
    settings.remove = False
    settings.allow_empty = True
    settings.log_level = "WARNING"
    return settings


@pytest.fixture
def patched_settings(mock_settings):
    """Patch the CLI settings lookup with mock_settings."""
    with patch("safefilename.cli.get_settings", return_value=mock_settings):
        yield mock_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove SAFEFILENAME_* variables and run from a directory without .env."""
    for name in (
        "SAFEFILENAME_EXTENDED",
        "SAFEFILENAME_REMOVE",
        "SAFEFILENAME_ALLOW_EMPTY",
        "SAFEFILENAME_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def tricky_names():
    """Inputs that exercise several rules at once."""
    return [
        "",
        "plain name.txt",
        "CON",
        "con.tar.gz",
        "cOn",
        "CON .",
        "CON\u00a0",
        "COM1",
        "lpt9.log",
        "CONTRACT",
        "con1",
        "C(ON",
        "CO(N.txt",
        "C:ON",
        "C\x00ON",
        "a/b\\c:d",
        'what? "quoted" <tag> | pipe *',
        "trailing...   ",
        "  leading",
        "tab\there\nnewline",
        "nbsp\u00a0zwsp\u200bideo\u3000bom\ufeffend",
        "a[b](c){d}",
        "\u2018single\u2019 \u00abguillemet\u00bb \u201cdouble\u201d",
        "$HOME/~user/#1 & 50% + =;,`'!",
        "\x7f\x85\x9f",
        ". . .",
    ]
