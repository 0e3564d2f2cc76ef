from core.domain.models import Character
from core.services import compute_stats


def _character(id: int, status: str) -> Character:
    return Character(id=id, name=f"c{id}", status=status, species="Human", image=f"u{id}")


def test_counts_by_status() -> None:
    stats = compute_stats(
        [_character(1, "Alive"), _character(2, "Dead"), _character(3, "unknown"), _character(4, "Alive")]
    )

    assert (stats.total, stats.alive, stats.dead, stats.unknown) == (4, 2, 1, 1)


def test_status_match_is_case_insensitive() -> None:
    stats = compute_stats([_character(1, "ALIVE"), _character(2, "dead "), _character(3, "Zombie")])

    assert (stats.alive, stats.dead, stats.unknown) == (1, 1, 1)


def test_empty_collection() -> None:
    stats = compute_stats([])

    assert stats.total == 0


def test_records_without_status_count_as_unknown() -> None:
    stats = compute_stats([Character.from_api({"id": 1, "name": "Rick Sanchez"})])

    assert (stats.total, stats.unknown) == (1, 1)
