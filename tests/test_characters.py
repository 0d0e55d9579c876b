"""Tests for urb_companion.characters — starting stats per race."""

import random

import pytest

from urb_companion.characters import (
    LIFE_FORCE_RANGE,
    RACE_STARTING_STATS,
    create_character,
    new_character_id,
)
from urb_companion.models import RACES


# ── create_character ────────────────────────────────────────


def test_barab_has_only_characteristics():
    char = create_character("Aria", "BARAB", "Stonecutter's daughter.")
    assert char.name == "Aria"
    assert char.race == "BARAB"
    assert char.background == "Stonecutter's daughter."
    assert char.skills == {}
    assert set(char.characteristics) == {"strength", "endurance", "perception", "agility"}
    assert 5 <= char.life_force <= 10
    assert char.experience_modifier == 0
    assert char.inventory == []
    assert char.session_history == []


def test_solozo_has_only_skills():
    char = create_character("Quell", "SOLOZO", "")
    assert set(char.skills) == {"technology", "diplomacy", "research", "stealth"}
    assert char.characteristics == {}


def test_twilighter_has_both():
    char = create_character("Nyx", "TWILIGHTER", "")
    assert set(char.skills) == {"mysticism", "perception"}
    assert set(char.characteristics) == {"intuition", "willpower"}


def test_other_has_both():
    char = create_character("Rook", "OTHER", "")
    assert set(char.skills) == {"survival", "communication"}
    assert set(char.characteristics) == {"strength", "agility"}


@pytest.mark.parametrize("race", RACES)
def test_stats_within_race_ranges(race):
    rng = random.Random(3)
    for _ in range(200):
        char = create_character("X", race, rng=rng)
        low, high = LIFE_FORCE_RANGE
        assert low <= char.life_force <= high
        for group in ("skills", "characteristics"):
            values = getattr(char, group)
            for name, lo, hi in RACE_STARTING_STATS[race][group]:
                assert lo <= values[name] <= hi


def test_life_force_covers_five_to_ten():
    rng = random.Random(11)
    seen = {create_character("X", "OTHER", rng=rng).life_force for _ in range(400)}
    assert seen == set(range(5, 11))


def test_exact_rolls_from_scripted_source(scripted):
    # life force, then strength, endurance, perception, agility
    char = create_character("Aria", "BARAB", "", rng=scripted(7, 6, 3, 2, 4))
    assert char.life_force == 7
    assert char.characteristics == {"strength": 6, "endurance": 3, "perception": 2, "agility": 4}


def test_unknown_race_rejected():
    with pytest.raises(ValueError):
        create_character("Aria", "ELF", "")


def test_lowercase_race_rejected():
    with pytest.raises(ValueError):
        create_character("Aria", "barab", "")


def test_ids_are_unique():
    ids = {create_character("X", "OTHER").id for _ in range(200)}
    assert len(ids) == 200


def test_new_character_id_shape():
    cid = new_character_id()
    assert len(cid) == 13
    assert cid.isalnum()


def test_starting_tables_are_read_only():
    with pytest.raises(TypeError):
        RACE_STARTING_STATS["ELF"] = {}
