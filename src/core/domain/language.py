"""Language utilities for character-cards.

This module centralizes the language options supported across the
application, plus the catalog of user-facing strings. Keeping it in the
domain layer lets the page, the adapters and the CLI share one source of
truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.SPANISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Spanish" if self is Language.SPANISH else "English"

    def text(self, key: str, **params: object) -> str:
        """Look up a catalog message and format it with `params`."""

        template = _MESSAGES[self][key]
        return template.format(**params) if params else template


_MESSAGES: dict[Language, dict[str, str]] = {
    Language.SPANISH: {
        "loading": "Cargando personajes...",
        "error": "Error: {message}",
        "empty": "No se encontraron personajes.",
        "unknown_error": "Error desconocido al cargar personajes",
        "http_status": "Error al obtener personajes: {status_code} {reason}",
        "transport": "No se pudo conectar con la API de personajes: {detail}",
        "parse": "Respuesta inválida de la API de personajes: {detail}",
        "species": "Especie",
        "status": "Estado",
        "image": "Imagen",
        "stats_title": "Resumen",
        "total": "Total",
        "alive": "Vivos",
        "dead": "Muertos",
        "unknown": "Desconocido",
    },
    Language.ENGLISH: {
        "loading": "Loading characters...",
        "error": "Error: {message}",
        "empty": "No characters found.",
        "unknown_error": "Unknown error while loading characters",
        "http_status": "Failed to fetch characters: {status_code} {reason}",
        "transport": "Could not reach the characters API: {detail}",
        "parse": "Invalid response from the characters API: {detail}",
        "species": "Species",
        "status": "Status",
        "image": "Image",
        "stats_title": "Summary",
        "total": "Total",
        "alive": "Alive",
        "dead": "Dead",
        "unknown": "Unknown",
    },
}
