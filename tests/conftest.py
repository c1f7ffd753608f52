"""Shared fixtures for envrecord tests."""

from __future__ import annotations

from pathlib import Path

import pytest

APP_KEYS = ("APP_ENV", "DB_NAME", "SOME_KEY")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Unset the test variables and run from an empty directory.

    Variables merged from dotenv files during a test are removed on teardown.
    """
    for key in APP_KEYS:
        # setenv first so teardown restores the pre-test state, merged values included
        monkeypatch.setenv(key, "unset")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
