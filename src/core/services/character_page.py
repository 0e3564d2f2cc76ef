"""Página de personajes: dispara la carga y expone el estado a la UI.

Este módulo concentra el flujo que antes vivía en el componente de la
página. La CLI solo se suscribe al estado y pinta; aquí no hay Rich ni
httpx, lo que permite probar la máquina de estados con un fetcher falso.

Estados: idle -> loading -> {success, error}.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.language import Language
from core.errors import HttpStatusError, ParseError, TransportError
from core.interfaces.fetcher import CharacterFetcher
from core.state import CharacterListState

logger = logging.getLogger(__name__)


def describe_error(exc: BaseException, language: Language | None = None) -> str:
    """Colapsa cualquier fallo de carga en un único texto mostrable."""

    language = language or Language.default()
    if isinstance(exc, (HttpStatusError, TransportError, ParseError)):
        return exc.message
    message = str(exc).strip()
    return message or language.text("unknown_error")


class CharacterPage:
    """Dueña del estado de la lista y de la única carga por montaje."""

    def __init__(
        self,
        fetcher: CharacterFetcher,
        *,
        language: Language | None = None,
        state: CharacterListState | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._language = language or Language.default()
        self._state = state or CharacterListState()
        self._task: asyncio.Task[None] | None = None
        self._mounted = False

    @property
    def state(self) -> CharacterListState:
        return self._state

    @property
    def language(self) -> Language:
        return self._language

    def mount(self) -> asyncio.Task[None]:
        """Programa la carga inicial; llamadas repetidas devuelven la misma tarea.

        Debe invocarse dentro de un event loop en ejecución.
        """

        if self._task is not None:
            return self._task
        self._mounted = True
        self._task = asyncio.get_running_loop().create_task(self._load())
        return self._task

    def unmount(self) -> None:
        """Cancela la carga en vuelo; su resultado ya no escribe estado.

        El flag de loading se baja aquí para que ningún observador del estado
        se quede viendo la vista de carga.
        """

        self._mounted = False
        if self._task is not None and not self._task.done():
            self._task.cancel()
            self._state.update(loading=False)

    def select(self, character_id: int) -> bool:
        """Click en una tarjeta: solo deja rastro en la consola de diagnóstico.

        Solo cuenta para tarjetas renderizadas; devuelve False si el id no está
        en la colección actual.
        """

        if not any(c.id == character_id for c in self._state.characters):
            logger.debug("Ignoring click on unknown card %s", character_id)
            return False
        logger.info("Card clicked %s", character_id)
        return True

    async def _load(self) -> None:
        self._state.update(loading=True, error=None)
        try:
            characters = await self._fetcher()
        except Exception as exc:
            message = describe_error(exc, self._language)
            logger.warning("Character load failed: %s", message)
            if self._mounted:
                self._state.update(error=message, loading=False)
        else:
            logger.debug("Loaded %d characters", len(characters))
            if self._mounted:
                self._state.update(characters=characters, loading=False)
        finally:
            if self._mounted and self._state.loading:
                self._state.update(loading=False)
