"""Acceso a la API pública de Rick and Morty.

Responsabilidad:
- Una única petición GET al endpoint de personajes.
- Validar el status HTTP, parsear el sobre JSON y devolver `results` tal cual
  (solo se exige que `results` sea una lista de objetos; sus campos no se validan).
- Clasificar cada fallo en `HttpStatusError`, `TransportError` o `ParseError`.

Sin reintentos ni caché: cada llamada es una petición nueva.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import ApiResponse, Character
from core.errors import HttpStatusError, ParseError, TransportError

logger = logging.getLogger(__name__)


async def get_characters(
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Character]:
    settings = settings or AppSettings()
    language = settings.default_language
    url = settings.characters_api_url

    logger.debug("GET %s", url)
    try:
        async with build_async_client(settings, transport=transport) as client:
            resp = await client.get(url)
    except httpx.TransportError as exc:
        raise TransportError(language.text("transport", detail=str(exc) or type(exc).__name__)) from exc

    if not resp.is_success:
        raise HttpStatusError(resp.status_code, resp.reason_phrase, language=language)

    try:
        envelope = ApiResponse.model_validate(resp.json())
    except ValidationError as exc:
        raise ParseError(language.text("parse", detail=f"{exc.error_count()} validation error(s)")) from exc
    except ValueError as exc:
        # json.JSONDecodeError y errores de decodificación del cuerpo.
        raise ParseError(language.text("parse", detail=str(exc) or type(exc).__name__)) from exc

    logger.debug("Received %d characters", len(envelope.results))
    return [Character.from_api(record) for record in envelope.results]
