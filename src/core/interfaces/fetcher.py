"""Contrato de la función de acceso a datos.

Por qué Protocol:
- La página depende de "algo que devuelve personajes", no de httpx.
- Permite sustituir la llamada real por un stub en tests sin herencia.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Character


@runtime_checkable
class CharacterFetcher(Protocol):
    """Callable asíncrono sin argumentos que devuelve la colección completa.

    Reglas de diseño:
    - Es asíncrono porque típicamente hará I/O (HTTP).
    - Falla con `core.errors.CharacterFetchError` (o cualquier otra excepción).
    """

    async def __call__(self) -> list[Character]:
        ...
