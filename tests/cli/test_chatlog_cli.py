"""Tests for the Typer CLI entrypoints."""

from __future__ import annotations

import os
from pathlib import Path

import orjson
import pytest
from typer.testing import CliRunner

from gtaw_chatlog.cli import TYPER_APP
from gtaw_chatlog.constants import VERSION
from gtaw_chatlog.paths import SETTINGS_PATH_ENV_VAR


@pytest.fixture(autouse=True)
def settings_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings store at a per-test file."""
    path = tmp_path / "config" / "settings.json"
    monkeypatch.setenv(SETTINGS_PATH_ENV_VAR, str(path))
    return path


def test_parse_prints_chat_log(tmp_path: Path) -> None:
    """`parse` should print the cleaned transcript of the newest storage file."""
    ragemp = _make_ragemp_directory(tmp_path, "[10:00:00] Hello &amp; welcome\\n[10:00:05] Bye\\n")

    result = CliRunner().invoke(TYPER_APP, ["parse", "--directory", str(ragemp)])

    assert result.exit_code == 0
    assert result.stdout == "[10:00:00] Hello & welcome\n[10:00:05] Bye\n"


def test_parse_removes_timestamps_and_writes_output(tmp_path: Path) -> None:
    """`parse -t -o` should save the timestamp-free transcript to the output file."""
    ragemp = _make_ragemp_directory(tmp_path, "[10:00:00] Hello\\n[10:00:05] Bye\\n")
    output_path = tmp_path / "exports" / "chatlog.txt"

    result = CliRunner().invoke(
        TYPER_APP,
        ["parse", "--directory", str(ragemp), "--remove-timestamps", "--output", str(output_path)],
    )

    assert result.exit_code == 0
    assert "Chat log saved to" in result.stdout
    assert output_path.read_text(encoding="utf-8") == "Hello\nBye"


def test_parse_uses_saved_directory(tmp_path: Path, settings_path: Path) -> None:
    """Without --directory the persisted directory path should be used."""
    ragemp = _make_ragemp_directory(tmp_path, "Saved\\n")
    settings_path.parent.mkdir(parents=True)
    settings_path.write_bytes(orjson.dumps({"directory_path": str(ragemp), "language_code": ""}))

    result = CliRunner().invoke(TYPER_APP, ["parse"])

    assert result.exit_code == 0
    assert result.stdout == "Saved\n"


def test_parse_without_directory_fails() -> None:
    """`parse` should exit 1 when no directory is configured."""
    result = CliRunner().invoke(TYPER_APP, ["parse"])

    assert result.exit_code == 1
    assert "No RAGEMP directory configured" in result.output


def test_parse_reports_missing_log(tmp_path: Path) -> None:
    """A directory without storage files should fail with the not-found message."""
    result = CliRunner().invoke(TYPER_APP, ["parse", "--directory", str(tmp_path)])

    assert result.exit_code == 1
    assert "Chat log file not found" in result.output


def test_parse_reports_malformed_log_in_spanish(tmp_path: Path, settings_path: Path) -> None:
    """Extraction errors should be shown in the saved language."""
    ragemp = _make_ragemp_directory(tmp_path, "ignored\\n")
    log_path = ragemp / "client_resources" / "play.gta.world_22005" / ".storage"
    log_path.write_text('{"server_version":"GTA World","rememberuser":"true"}', encoding="utf-8")
    settings_path.parent.mkdir(parents=True)
    settings_path.write_bytes(orjson.dumps({"directory_path": "", "language_code": "es-ES"}))

    result = CliRunner().invoke(TYPER_APP, ["parse", "--directory", str(ragemp)])

    assert result.exit_code == 1
    assert "formato incorrecto" in result.output


def test_parse_follows_located_resource_directory(tmp_path: Path) -> None:
    """A matching top-level storage file redirects extraction below a directory of the same name."""
    ragemp = _make_ragemp_directory(tmp_path, "Default\\n")
    client_resources = ragemp / "client_resources"
    (client_resources / "play.gta.world_22005.storage").write_text(_storage_document("Top\\n"), encoding="utf-8")

    result = CliRunner().invoke(TYPER_APP, ["parse", "--directory", str(ragemp)])

    assert result.exit_code == 1
    assert "Chat log file not found" in result.output


def test_locate_prints_resource_location(tmp_path: Path) -> None:
    """`locate` should print the selected resource directory and relative log path."""
    ragemp = _make_ragemp_directory(tmp_path, "Hi\\n")
    (ragemp / "client_resources" / "play.gta.world_22005.storage").write_text(
        _storage_document("Hi\\n"), encoding="utf-8"
    )

    result = CliRunner().invoke(TYPER_APP, ["locate", "--directory", str(ragemp)])

    assert result.exit_code == 0
    assert "resource_directory=play.gta.world_22005.storage\n" in result.stdout
    expected_path = os.path.join("client_resources", "play.gta.world_22005.storage", ".storage")
    assert f"log_path={expected_path}\n" in result.stdout


def test_locate_reports_default_location(tmp_path: Path) -> None:
    """`locate` should fall back to the default location without failing."""
    result = CliRunner().invoke(TYPER_APP, ["locate", "--directory", str(tmp_path)])

    assert result.exit_code == 0
    assert "resource_directory=Not Found" in result.stdout


def test_config_set_directory_and_show(tmp_path: Path, settings_path: Path) -> None:
    """`config set-directory` should persist the resolved path shown by `config show`."""
    ragemp = tmp_path / "ragemp"
    ragemp.mkdir()
    runner = CliRunner()

    set_result = runner.invoke(TYPER_APP, ["config", "set-directory", str(ragemp)])
    show_result = runner.invoke(TYPER_APP, ["config", "show"])

    assert set_result.exit_code == 0
    assert orjson.loads(settings_path.read_bytes())["directory_path"] == str(ragemp.resolve())
    assert show_result.exit_code == 0
    assert f"directory_path={ragemp.resolve()}" in show_result.stdout
    assert f"settings_path={settings_path}" in show_result.stdout


def test_config_set_directory_rejects_missing_path(tmp_path: Path, settings_path: Path) -> None:
    """A non-existent directory should be rejected and nothing persisted."""
    result = CliRunner().invoke(TYPER_APP, ["config", "set-directory", str(tmp_path / "missing")])

    assert result.exit_code != 0
    assert not settings_path.exists()


def test_config_set_directory_reports_unwritable_settings(tmp_path: Path, settings_path: Path) -> None:
    """A settings location that cannot be written should be reported as a bad parameter."""
    ragemp = tmp_path / "ragemp"
    ragemp.mkdir()
    settings_path.parent.write_text("", encoding="utf-8")

    result = CliRunner().invoke(TYPER_APP, ["config", "set-directory", str(ragemp)])

    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)


def test_config_set_language_persists_code(settings_path: Path) -> None:
    """`config set-language` should store the culture code and answer in that language."""
    result = CliRunner().invoke(TYPER_APP, ["config", "set-language", "Spanish"])

    assert result.exit_code == 0
    assert "Idioma establecido en Spanish" in result.stdout
    assert orjson.loads(settings_path.read_bytes())["language_code"] == "es-ES"


def test_version_command_prints_version() -> None:
    """`version` should print the application version."""
    result = CliRunner().invoke(TYPER_APP, ["version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == VERSION


def _make_ragemp_directory(tmp_path: Path, chat_log_body: str) -> Path:
    """Create a RAGEMP layout with a GTA World storage file at the default log location."""
    ragemp = tmp_path / "ragemp"
    server_dir = ragemp / "client_resources" / "play.gta.world_22005"
    server_dir.mkdir(parents=True)
    (server_dir / ".storage").write_text(_storage_document(chat_log_body), encoding="utf-8")
    return ragemp


def _storage_document(chat_log_body: str) -> str:
    return '{"server_version":"GTA World 1.4.2","chat_log":"' + chat_log_body + '","rememberuser":"true"}'
