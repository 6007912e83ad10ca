"""Supported languages and their message catalogs."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Languages the user interface can be shown in."""

    ENGLISH = "English"
    SPANISH = "Spanish"


DEFAULT_LANGUAGE = Language.ENGLISH

LANGUAGE_CODES: dict[Language, str] = {
    Language.ENGLISH: "en-US",
    Language.SPANISH: "es-ES",
}

MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "error_title": "Error",
        "log_not_found": "Chat log file not found: {path}",
        "log_malformed": "Chat log is empty or in an incorrect format.",
        "unexpected_error": "Unexpected error occurred: {details}",
        "directory_not_set": "No RAGEMP directory configured. Use --directory or 'config set-directory'.",
        "directory_missing": "Directory does not exist: {path}",
        "directory_saved": "RAGEMP directory set to {path}",
        "language_saved": "Language set to {language_name}",
        "resource_not_found": "No GTA World storage file found; using the default log location.",
        "saved_to": "Chat log saved to {path}",
    },
    Language.SPANISH: {
        "error_title": "Error",
        "log_not_found": "No se encontró el archivo del registro de chat: {path}",
        "log_malformed": "El registro de chat está vacío o tiene un formato incorrecto.",
        "unexpected_error": "Ocurrió un error inesperado: {details}",
        "directory_not_set": "No hay un directorio de RAGEMP configurado. Usa --directory o 'config set-directory'.",
        "directory_missing": "El directorio no existe: {path}",
        "directory_saved": "Directorio de RAGEMP establecido en {path}",
        "language_saved": "Idioma establecido en {language_name}",
        "resource_not_found": "No se encontró un archivo de GTA World; se usa la ubicación por defecto.",
        "saved_to": "Registro de chat guardado en {path}",
    },
}


def get_code_from_language(language: Language) -> str:
    """Return the culture code for a language, defaulting to English."""
    return LANGUAGE_CODES.get(language, LANGUAGE_CODES[DEFAULT_LANGUAGE])


def get_language_from_code(code: str | None) -> Language:
    """Return the language for a culture code; unknown or empty codes map to English."""
    for language, language_code in LANGUAGE_CODES.items():
        if language_code == code:
            return language
    return DEFAULT_LANGUAGE


def translate(key: str, language: Language = DEFAULT_LANGUAGE, /, **fields: object) -> str:
    """Format the message for `key`, falling back to the English catalog."""
    template = MESSAGES.get(language, {}).get(key) or MESSAGES[DEFAULT_LANGUAGE][key]
    return template.format(**fields)
