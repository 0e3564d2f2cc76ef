"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación en el borde y documentación autocontenida (Field) sin
  acoplar el Core a librerías de I/O.
- Solo se valida el sobre; los registros se toman tal cual llegan de la API.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Character(BaseModel):
    """Un personaje tal como lo devuelve la API.

    Inmutable una vez obtenido: la página lo posee mientras dure un montaje.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | None = Field(
        default=None,
        description="Identificador estable y único del personaje en la API.",
    )
    name: str = Field(
        default="",
        description="Nombre del personaje (título de la tarjeta).",
    )
    status: str = Field(
        default="",
        description="Estado vital según la API ('Alive', 'Dead', 'unknown').",
    )
    species: str = Field(
        default="",
        description="Especie (descripción de la tarjeta).",
    )
    image: str = Field(
        default="",
        description="URL del avatar del personaje.",
    )

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "Character":
        """Envuelve un registro crudo sin validar ni convertir sus valores.

        Las claves ausentes toman su default y las desconocidas se descartan.
        """

        known = {key: value for key, value in record.items() if key in cls.model_fields}
        return cls.model_construct(**known)


class ApiResponse(BaseModel):
    """Sobre JSON de `/api/character`: la colección vive bajo `results`."""

    model_config = ConfigDict(extra="ignore")

    results: list[dict[str, Any]] = Field(
        ...,
        description="Registros crudos en el orden en que los entrega la API.",
    )


class CharacterStats(BaseModel):
    """Conteo de personajes por estado vital."""

    total: int = Field(default=0, ge=0)
    alive: int = Field(default=0, ge=0)
    dead: int = Field(default=0, ge=0)
    unknown: int = Field(default=0, ge=0)
