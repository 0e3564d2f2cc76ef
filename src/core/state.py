"""Contenedor de estado observable de la lista de personajes.

Por qué un contenedor explícito:
- Los tres campos (colección, loading, error) cambian juntos; `update` los
  aplica en bloque y notifica una sola vez.
- La vista a renderizar se deriva del estado, nunca se guarda aparte.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from core.domain.models import Character


class View(str, Enum):
    """Vistas mutuamente excluyentes de la página."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    CARDS = "cards"


Listener = Callable[["CharacterListState"], None]

_UNSET = object()


@dataclass
class CharacterListState:
    characters: tuple[Character, ...] = ()
    loading: bool = False
    error: str | None = None
    _listeners: list[Listener] = field(default_factory=list, repr=False, compare=False)

    @property
    def view(self) -> View:
        # Prioridad estricta: loading > error > vacío > tarjetas.
        if self.loading:
            return View.LOADING
        if self.error:
            return View.ERROR
        if not self.characters:
            return View.EMPTY
        return View.CARDS

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registra `listener` y devuelve la función para darlo de baja."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(
        self,
        *,
        characters: object = _UNSET,
        loading: object = _UNSET,
        error: object = _UNSET,
    ) -> bool:
        """Aplica los campos dados y notifica si algo cambió.

        Devuelve True si hubo cambio.
        """

        changed = False
        if characters is not _UNSET:
            new_characters = tuple(characters)  # type: ignore[arg-type]
            if new_characters != self.characters:
                self.characters = new_characters
                changed = True
        if loading is not _UNSET and loading != self.loading:
            self.loading = bool(loading)
            changed = True
        if error is not _UNSET and error != self.error:
            self.error = error  # type: ignore[assignment]
            changed = True

        if changed:
            for listener in list(self._listeners):
                listener(self)
        return changed
