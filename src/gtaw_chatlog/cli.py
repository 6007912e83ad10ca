"""CLI entrypoints for the GTA World chat log parser."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from .constants import VERSION
from .discovery import locate_storage
from .extraction import ExtractionError, ExtractionRequest, LogNotFoundError, MalformedLogError, parse_chat_log
from .localization import Language, LocalizationService
from .settings import SettingsError, SettingsStore

LOGGER = logging.getLogger(__name__)

TYPER_APP = typer.Typer(help="Extract GTA World chat logs from RAGEMP client storage.")
CONFIG_APP = typer.Typer(help="Show or change persisted settings.")
TYPER_APP.add_typer(CONFIG_APP, name="config")


@TYPER_APP.callback()
def main() -> None:
    """Root CLI callback."""


@TYPER_APP.command("locate")
def locate_command(
    directory: Path | None = typer.Option(
        None,
        "--directory",
        "-d",
        help="RAGEMP installation directory. Defaults to the saved directory.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info-level logging."),
) -> None:
    """Print the resource directory and log path of the newest GTA World storage file."""
    _configure_logging(verbose)
    settings_store = SettingsStore()
    localization = _build_localization(settings_store)
    base_directory = directory if directory is not None else settings_store.load().directory_path

    location = locate_storage(base_directory)
    if not location.is_found:
        Console(stderr=True).print(localization.translate("resource_not_found"), style="yellow", markup=False)

    typer.echo(f"resource_directory={location.resource_directory_name}")
    typer.echo(f"log_path={location.relative_log_path}")


@TYPER_APP.command("parse")
def parse_command(
    directory: Path | None = typer.Option(
        None,
        "--directory",
        "-d",
        help="RAGEMP installation directory. Defaults to the saved directory.",
    ),
    remove_timestamps: bool = typer.Option(
        False,
        "--remove-timestamps",
        "-t",
        help="Strip [HH:MM:SS] prefixes from chat lines.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the chat log to this file instead of stdout.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable info-level logging."),
) -> None:
    """Extract the most recent chat log and print or save it."""
    _configure_logging(verbose)
    settings_store = SettingsStore()
    localization = _build_localization(settings_store)
    error_console = Console(stderr=True)

    base_directory = _resolve_base_directory(directory, settings_store)
    if base_directory is None:
        error_console.print(localization.translate("directory_not_set"), style="red", markup=False)
        raise typer.Exit(code=1)

    location = locate_storage(base_directory)
    request = ExtractionRequest(base_directory=base_directory, strip_timestamps=remove_timestamps)
    try:
        chat_log = parse_chat_log(request, location)
    except ExtractionError as exc:
        LOGGER.info("Extraction failed for %s: %s", base_directory, exc)
        error_console.print(
            f"{localization.translate('error_title')}: {_describe_extraction_error(exc, localization)}",
            style="red",
            markup=False,
        )
        raise typer.Exit(code=1) from exc

    if output is None:
        typer.echo(chat_log)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        _ = output.write_text(chat_log, encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(localization.translate("unexpected_error", details=exc)) from exc
    Console().print(localization.translate("saved_to", path=output), style="green", markup=False)


@TYPER_APP.command("version")
def version_command() -> None:
    """Print the application version."""
    typer.echo(VERSION)


@CONFIG_APP.command("show")
def config_show_command() -> None:
    """Print the persisted settings."""
    settings_store = SettingsStore()
    settings = settings_store.load()
    typer.echo(f"settings_path={settings_store.settings_path}")
    typer.echo(f"directory_path={settings.directory_path}")
    typer.echo(f"language_code={settings.language_code}")


@CONFIG_APP.command("set-directory")
def config_set_directory_command(
    directory: Path = typer.Argument(..., help="RAGEMP installation directory."),
) -> None:
    """Save the RAGEMP installation directory."""
    settings_store = SettingsStore()
    localization = _build_localization(settings_store)
    if not directory.is_dir():
        raise typer.BadParameter(localization.translate("directory_missing", path=directory))

    resolved = directory.resolve()
    try:
        _ = settings_store.update(directory_path=str(resolved))
    except SettingsError as exc:
        raise typer.BadParameter(str(exc)) from exc
    Console().print(localization.translate("directory_saved", path=resolved), style="green", markup=False)


@CONFIG_APP.command("set-language")
def config_set_language_command(
    language: Language = typer.Argument(..., help="Language for user-facing messages."),
) -> None:
    """Save the language used for user-facing messages."""
    localization = LocalizationService(SettingsStore())
    localization.set_language(language, save=True)
    message = localization.translate("language_saved", language_name=language.value)
    Console().print(message, style="green", markup=False)


def _configure_logging(verbose: bool) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(asctime)s][%(levelname)s][%(name)s] %(message)s",
    )


def _build_localization(settings_store: SettingsStore) -> LocalizationService:
    localization = LocalizationService(settings_store)
    localization.initialize_locale()
    return localization


def _resolve_base_directory(directory: Path | None, settings_store: SettingsStore) -> Path | None:
    """Prefer the explicit directory, then the saved one; None when neither is set."""
    if directory is not None:
        return directory
    saved_directory = settings_store.load().directory_path
    if not saved_directory.strip():
        return None
    return Path(saved_directory)


def _describe_extraction_error(exc: ExtractionError, localization: LocalizationService) -> str:
    if isinstance(exc, LogNotFoundError):
        return localization.translate("log_not_found", path=exc.log_file_path)
    if isinstance(exc, MalformedLogError):
        return localization.translate("log_malformed")
    return localization.translate("unexpected_error", details=exc)


def module_cli_entry_point() -> None:
    """Console script entrypoint."""
    TYPER_APP()
