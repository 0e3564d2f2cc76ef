"""Resumen por estado vital de una colección de personajes."""

from __future__ import annotations

from typing import Iterable

from core.domain.models import Character, CharacterStats


def compute_stats(characters: Iterable[Character]) -> CharacterStats:
    """Cuenta vivos/muertos/desconocidos.

    La API usa 'Alive', 'Dead' y 'unknown'; se compara sin distinguir
    mayúsculas y cualquier otro valor cuenta como desconocido.
    """

    total = alive = dead = unknown = 0
    for character in characters:
        total += 1
        status = str(character.status).strip().lower()
        if status == "alive":
            alive += 1
        elif status == "dead":
            dead += 1
        else:
            unknown += 1
    return CharacterStats(total=total, alive=alive, dead=dead, unknown=unknown)
