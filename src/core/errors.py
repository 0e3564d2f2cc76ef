"""Errores al obtener personajes.

Por qué una jerarquía cerrada:
- La página traduce cada tipo a un mensaje sin adivinar qué lanzó httpx/json.
- Las tres clases concretas cubren todo lo que puede fallar en una petición.
"""

from __future__ import annotations

from core.domain.language import Language


class CharacterFetchError(Exception):
    """Base de los fallos de la función de acceso a datos."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class HttpStatusError(CharacterFetchError):
    """La API respondió con un status fuera de 2xx."""

    def __init__(self, status_code: int, reason: str, *, language: Language | None = None) -> None:
        language = language or Language.default()
        super().__init__(language.text("http_status", status_code=status_code, reason=reason).strip())
        self.status_code = status_code
        self.reason = reason


class TransportError(CharacterFetchError):
    """Fallo de red por debajo de HTTP (DNS, TLS, conexión rechazada, timeout)."""


class ParseError(CharacterFetchError):
    """El cuerpo no es JSON válido o no tiene la forma {results: [...]}."""


# Nombre con el que la función de acceso documenta su fallo por status.
RequestError = HttpStatusError
