"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la página lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language

CHARACTERS_API_URL = "https://rickandmortyapi.com/api/character"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "character-cards"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "character-cards"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "character-cards"
    return Path.home() / ".config" / "character-cards"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHARACTER_CARDS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    characters_api_url: str = Field(
        default=CHARACTERS_API_URL,
        min_length=8,
        description="Endpoint que devuelve el sobre {results: [...]} de personajes.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="character-cards/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )

    default_language: Language = Field(
        default=Language.SPANISH,
        description="Idioma por defecto de los mensajes en pantalla (en/es).",
    )
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging para la consola de diagnóstico.",
    )
