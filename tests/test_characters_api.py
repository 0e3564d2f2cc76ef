import asyncio

import httpx
import pytest

from adapters.characters_api import get_characters
from cli.ui_components import build_cards
from core.domain.language import Language
from core.services import CharacterPage
from core.state import View
from core.config import CHARACTERS_API_URL
from core.errors import HttpStatusError, ParseError, RequestError, TransportError

RICK = {
    "id": 1,
    "name": "Rick Sanchez",
    "status": "Alive",
    "species": "Human",
    "image": "u1",
    "gender": "Male",
    "episode": ["https://rickandmortyapi.com/api/episode/1"],
}
MORTY = {"id": 2, "name": "Morty Smith", "status": "Alive", "species": "Human", "image": "u2"}


def _fetch(settings, handler):
    return asyncio.run(get_characters(settings=settings, transport=httpx.MockTransport(handler)))


def test_returns_results_in_order(settings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"info": {"count": 2}, "results": [RICK, MORTY]})

    characters = _fetch(settings, handler)

    assert [c.id for c in characters] == [1, 2]
    assert [c.name for c in characters] == ["Rick Sanchez", "Morty Smith"]
    assert characters[0].image == "u1"
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == CHARACTERS_API_URL
    assert seen[0].headers["Accept"] == "application/json"


def test_empty_results(settings) -> None:
    characters = _fetch(settings, lambda request: httpx.Response(200, json={"results": []}))

    assert characters == []


def test_non_success_status_raises_http_status_error(settings) -> None:
    with pytest.raises(HttpStatusError) as info:
        _fetch(settings, lambda request: httpx.Response(500))

    assert info.value.status_code == 500
    assert info.value.reason == "Internal Server Error"
    assert "500" in info.value.message
    assert isinstance(info.value, RequestError)


def test_not_found_status_is_not_retried(settings) -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(404)

    with pytest.raises(HttpStatusError):
        _fetch(settings, handler)

    assert len(calls) == 1


def test_invalid_json_raises_parse_error(settings) -> None:
    with pytest.raises(ParseError) as info:
        _fetch(settings, lambda request: httpx.Response(200, content=b"<html>oops</html>"))

    assert info.value.message


def test_missing_results_raises_parse_error(settings) -> None:
    with pytest.raises(ParseError):
        _fetch(settings, lambda request: httpx.Response(200, json={"error": "nope"}))


def test_connection_failure_raises_transport_error(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as info:
        _fetch(settings, handler)

    assert "connection refused" in info.value.message
    assert isinstance(info.value.__cause__, httpx.ConnectError)


def test_uses_configured_url(settings) -> None:
    custom = settings.model_copy(update={"characters_api_url": "https://example.test/api/character"})
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"results": [MORTY]})

    _fetch(custom, handler)

    assert seen == ["https://example.test/api/character"]


def test_minimal_records_render_as_cards_end_to_end(settings) -> None:
    payload = {
        "results": [
            {"id": 1, "name": "Rick Sanchez", "species": "Human", "image": "u1"},
            {"id": 2, "name": "Morty Smith", "species": "Human", "image": "u2"},
        ]
    }
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=payload))

    async def scenario() -> CharacterPage:
        page = CharacterPage(
            lambda: get_characters(settings=settings, transport=transport),
            language=Language.ENGLISH,
        )
        await page.mount()
        return page

    page = asyncio.run(scenario())

    assert page.state.view is View.CARDS
    columns = build_cards(page.state.characters, Language.ENGLISH)
    assert [panel.title.plain for panel in columns.renderables] == ["Rick Sanchez", "Morty Smith"]
    assert [panel.subtitle.plain for panel in columns.renderables] == ["#1", "#2"]


def test_record_values_are_passed_through_unchanged(settings) -> None:
    record = {"id": "1", "name": "Rick Sanchez", "status": None, "species": 42, "origin": {"name": "Earth"}}

    characters = _fetch(settings, lambda request: httpx.Response(200, json={"results": [record]}))

    assert characters[0].id == "1"
    assert characters[0].status is None
    assert characters[0].species == 42
    assert characters[0].image == ""
    assert not hasattr(characters[0], "origin")


def test_results_that_are_not_a_list_raise_parse_error(settings) -> None:
    with pytest.raises(ParseError):
        _fetch(settings, lambda request: httpx.Response(200, json={"results": {"id": 1}}))


def test_body_that_is_not_an_object_raises_parse_error(settings) -> None:
    with pytest.raises(ParseError):
        _fetch(settings, lambda request: httpx.Response(200, json=[{"id": 1}]))
