"""CLI principal (Typer).

Por qué Typer:
- Comandos y flags tipados sin boilerplate de argparse.
- Subcomandos (`doctor`) se registran como sub-apps independientes.

La CLI no decide nada sobre el estado: monta la página, se suscribe y pinta.
"""

from __future__ import annotations

import asyncio
import functools
import logging

import typer
from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler

from adapters.characters_api import get_characters
from cli.doctor import app as doctor_app
from cli.ui_components import build_stats_table, print_banner, render_view
from core.config import AppSettings
from core.domain.language import Language
from core.services import CharacterPage, compute_stats
from core.state import CharacterListState, View

app = typer.Typer(no_args_is_help=True, help="Rick and Morty characters rendered as terminal cards.")
app.add_typer(doctor_app, name="doctor")

_console = Console()


def _configure_logging(level: str) -> None:
    """Logs de diagnóstico a stderr para no ensuciar la salida de las tarjetas."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


async def _show(page: CharacterPage) -> None:
    language = page.language

    def _rerender(state: CharacterListState) -> None:
        live.update(render_view(state, language))

    with Live(render_view(page.state, language), console=_console, transient=True) as live:
        unsubscribe = page.state.subscribe(_rerender)
        try:
            await page.mount()
        finally:
            unsubscribe()
            page.unmount()

    _console.print(render_view(page.state, language))


@app.command(name="list")
def list_characters(
    lang: Language | None = typer.Option(None, "--lang", help="Idioma de los mensajes (es/en)."),
    stats: bool = typer.Option(False, "--stats", help="Muestra el resumen por estado vital."),
    select: int | None = typer.Option(None, "--select", help="Simula el click en la tarjeta con este id."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Omite el banner de bienvenida."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logs de depuración."),
) -> None:
    """Fetch characters once and render them as cards."""

    settings = AppSettings()
    if lang is not None:
        settings = settings.model_copy(update={"default_language": lang})
    _configure_logging("DEBUG" if verbose else settings.log_level)

    language = settings.default_language
    page = CharacterPage(functools.partial(get_characters, settings=settings), language=language)

    if not no_banner:
        print_banner(_console)

    asyncio.run(_show(page))

    state = page.state
    if select is not None:
        page.select(select)
    if stats and state.view is View.CARDS:
        _console.print(build_stats_table(compute_stats(state.characters), language))
    if state.view is View.ERROR:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
