"""Servicios del Core: orquestación sin efectos de UI."""

from core.services.character_page import CharacterPage, describe_error
from core.services.stats import compute_stats

__all__ = [
    "CharacterPage",
    "compute_stats",
    "describe_error",
]
