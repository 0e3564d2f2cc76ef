import pytest

from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import Character


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, default_language=Language.ENGLISH)


@pytest.fixture
def rick() -> Character:
    return Character(id=1, name="Rick Sanchez", status="Alive", species="Human", image="u1")


@pytest.fixture
def morty() -> Character:
    return Character(id=2, name="Morty Smith", status="Alive", species="Human", image="u2")
