"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- `render_view` es una función pura del estado: la CLI la llama en cada
  notificación y los tests la inspeccionan sin terminal.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.columns import Columns
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from core.domain.language import Language
from core.domain.models import Character, CharacterStats
from core.state import CharacterListState, View

_STATUS_STYLES = {
    "alive": "green",
    "dead": "red",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite con `--no-banner` en modos no interactivos.
    """

    title = Text("Character Cards", style="bold cyan")
    subtitle = Text("rickandmortyapi.com • personajes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_character_card(character: Character, language: Language) -> Panel:
    """Tarjeta de un personaje: nombre como título, especie e imagen en el cuerpo."""

    # Los registros no se validan: cualquier campo puede venir con otro tipo.
    status = str(character.status)
    image = str(character.image)
    status_style = _STATUS_STYLES.get(status.strip().lower(), "yellow")
    body = Text()
    body.append(f"{language.text('species')}: ", style="bold")
    body.append(f"{character.species}\n")
    body.append(f"{language.text('status')}: ", style="bold")
    body.append(f"{status}\n", style=status_style)
    body.append(f"{language.text('image')}: ", style="bold")
    body.append(image, style=Style(link=image) if image else "")

    return Panel(
        body,
        title=Text(str(character.name), style="bold white"),
        subtitle=Text(f"#{character.id}", style="dim"),
        border_style="cyan",
        width=48,
    )


def build_cards(characters: Sequence[Character], language: Language) -> Columns:
    """Una tarjeta por personaje, en el orden recibido."""

    return Columns([build_character_card(c, language) for c in characters], equal=True)


def build_stats_table(stats: CharacterStats, language: Language) -> Table:
    table = Table(title=language.text("stats_title"))
    table.add_column(language.text("total"), style="cyan", justify="right")
    table.add_column(language.text("alive"), style="green", justify="right")
    table.add_column(language.text("dead"), style="red", justify="right")
    table.add_column(language.text("unknown"), style="yellow", justify="right")
    table.add_row(str(stats.total), str(stats.alive), str(stats.dead), str(stats.unknown))
    return table


def render_view(state: CharacterListState, language: Language) -> RenderableType:
    """Traduce el estado actual a exactamente una de las cuatro vistas."""

    view = state.view
    if view is View.LOADING:
        return Text(language.text("loading"), style="dim")
    if view is View.ERROR:
        return Text(language.text("error", message=state.error), style="bold red")
    if view is View.EMPTY:
        return Text(language.text("empty"), style="yellow")
    return build_cards(state.characters, language)
