"""Tests for the envrecord-check command and real process exit behavior."""

from __future__ import annotations

import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from envrecord.cli import import_record_type, main

REPO_ROOT = Path(__file__).resolve().parent.parent

RECORD_MODULE = textwrap.dedent(
    """
    from dataclasses import dataclass

    from envrecord.services.field_mapping import env_field


    @dataclass
    class Settings:
        ENVIRONMENT: str = env_field("APP_ENV")
        DB_NAME: str = env_field()
        SOME_KEY: str = env_field()


    NOT_A_CLASS = 42
    """
)


@pytest.fixture
def settings_module(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable module holding a record type."""
    module_name = f"cli_settings_{abs(hash(str(clean_env)))}"
    (clean_env / f"{module_name}.py").write_text(RECORD_MODULE)
    monkeypatch.syspath_prepend(str(clean_env))
    return module_name


def _subprocess_env() -> dict[str, str]:
    env = {k: v for k, v in os.environ.items() if k not in {"APP_ENV", "DB_NAME", "SOME_KEY"}}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return env


def test_import_record_type__resolves_module_and_class(settings_module: str) -> None:
    """Import the class named by a module:Class path."""
    record_type = import_record_type(f"{settings_module}:Settings")

    assert record_type.__name__ == "Settings"


@pytest.mark.parametrize("path", ["no_colon", ":Settings", "module:"])
def test_import_record_type__rejects_malformed_paths(path: str) -> None:
    """Raise ValueError for paths without both a module and an attribute."""
    with pytest.raises(ValueError):
        import_record_type(path)


def test_import_record_type__rejects_missing_or_non_class_attributes(settings_module: str) -> None:
    """Raise ValueError for unknown attributes and non-class targets."""
    with pytest.raises(ValueError):
        import_record_type(f"{settings_module}:Missing")

    with pytest.raises(ValueError):
        import_record_type(f"{settings_module}:NOT_A_CLASS")


def test_main__returns_zero_when_dotenv_satisfies_record(
    settings_module: str, clean_env: Path
) -> None:
    """Exit cleanly when the given dotenv file defines every variable."""
    env_file = clean_env / "app.env"
    env_file.write_text("APP_ENV=staging\nDB_NAME=test_db\nSOME_KEY=abc123\n")

    assert main([f"{settings_module}:Settings", str(env_file)]) == 0


def test_main__exits_non_zero_when_variables_are_missing(settings_module: str) -> None:
    """Abort with a non-zero status when variables are missing."""
    with pytest.raises(SystemExit) as exc_info:
        main([f"{settings_module}:Settings"])

    assert exc_info.value.code != 0


def test_main__reports_unknown_record_as_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Exit with status 2 and a usage message for an unimportable record."""
    with pytest.raises(SystemExit) as exc_info:
        main(["definitely_not_a_module_xyz:Settings"])

    assert exc_info.value.code == 2
    assert "envrecord-check" in capsys.readouterr().err


def test_load_or_exit__terminates_process_with_report(tmp_path: Path) -> None:
    """Terminate a real process with a non-zero status and a full report."""
    script = RECORD_MODULE + textwrap.dedent(
        """
        from envrecord.services.loader import load_or_exit

        load_or_exit(Settings)
        print("unreachable")
        """
    )

    result = subprocess.run(
        [sys.executable, "-c", script],
        cwd=tmp_path,
        env=_subprocess_env(),
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode != 0
    assert "unreachable" not in result.stdout
    for msg in (
        "Errors loading environment variables:",
        "has no `APP_ENV` environment variable defined",
        "has no `DB_NAME` environment variable defined",
        "has no `SOME_KEY` environment variable defined",
        "Aborting due to missing env vars",
    ):
        assert msg in result.stderr
