"""Tests for urb_companion.session — turn orchestration over storage."""

import random

import pytest
from pydantic import ValidationError

from urb_companion import narration
from urb_companion.session import (
    CharacterNotFoundError,
    SessionNotFoundError,
    attempt_action,
    create_session_character,
    send_message,
    start_session,
    update_session_character,
)


@pytest.fixture
def session_id(storage) -> str:
    return start_session(storage, "Night Run").id


@pytest.fixture
def with_character(storage, session_id, scripted) -> str:
    # BARAB: life force 8, strength 5, endurance 4, perception 3, agility 3
    create_session_character(storage, session_id, "Aria", "BARAB", "Courier.", rng=scripted(8, 5, 4, 3, 3))
    return session_id


# ── start_session ───────────────────────────────────────────


def test_start_session_greets(storage):
    session = start_session(storage, "Night Run")
    stored = storage.get_session(session.id)
    assert stored.name == "Night Run"
    assert [(m.sender, m.content) for m in stored.messages] == [("dm", narration.SESSION_WELCOME)]
    assert stored.messages[0].seq == 1


# ── create_session_character ────────────────────────────────


def test_create_character_stores_and_welcomes(storage, session_id):
    char = create_session_character(storage, session_id, "Aria", "TWILIGHTER", "Courier.")
    stored = storage.get_session(session_id)
    assert stored.character == char
    assert stored.messages[-1].sender == "dm"
    assert stored.messages[-1].content == (
        "Welcome, Aria of the Twilighter! Your adventure in the URB world begins now."
    )
    assert stored.messages[-1].seq == 2


def test_replacing_character_does_not_welcome_again(storage, session_id):
    create_session_character(storage, session_id, "Aria", "BARAB")
    create_session_character(storage, session_id, "Brun", "OTHER")
    stored = storage.get_session(session_id)
    assert stored.character.name == "Brun"
    assert sum("Welcome," in m.content for m in stored.messages) == 1


def test_create_character_bad_race(storage, session_id):
    with pytest.raises(ValueError):
        create_session_character(storage, session_id, "Aria", "ELF")
    assert storage.get_session(session_id).character is None


def test_create_character_missing_session(storage):
    with pytest.raises(SessionNotFoundError):
        create_session_character(storage, "nope", "Aria", "BARAB")


# ── update_session_character ────────────────────────────────


def test_update_character_fields(storage, with_character):
    updated = update_session_character(storage, with_character, {
        "name": "Aria Vell",
        "experience_modifier": 2,
        "inventory": ["rope", "lamp"],
    })
    assert updated.name == "Aria Vell"
    assert updated.experience_modifier == 2
    assert storage.get_session(with_character).character.inventory == ["rope", "lamp"]


def test_update_character_keeps_id(storage, with_character):
    original = storage.get_session(with_character).character
    updated = update_session_character(storage, with_character, {"background": "Smuggler."})
    assert updated.id == original.id
    with pytest.raises(ValueError):
        update_session_character(storage, with_character, {"id": "other"})


def test_update_character_validates(storage, with_character):
    with pytest.raises(ValidationError):
        update_session_character(storage, with_character, {"life_force": -1})
    with pytest.raises(ValidationError):
        update_session_character(storage, with_character, {"race": "ELF"})


def test_update_without_character(storage, session_id):
    with pytest.raises(CharacterNotFoundError):
        update_session_character(storage, session_id, {"name": "x"})


# ── send_message ────────────────────────────────────────────


def test_chat_without_character(storage, session_id):
    messages = send_message(storage, session_id, "Hello?")
    assert [(m.sender, m.content) for m in messages] == [
        ("player", "Hello?"),
        ("system", narration.NO_CHARACTER_CHAT),
    ]


def test_chat_with_character_uses_narrator(storage, with_character):
    messages = send_message(storage, with_character, "Tell me about Richland")
    assert messages[0].sender == "player"
    assert messages[1].sender == "dm"
    assert messages[1].content.startswith("Richland stands")
    assert storage.get_session(with_character).messages[-2:] == messages


def test_chat_custom_narrator(storage, with_character):
    calls = []

    def narrator(text, character):
        calls.append((text, character.name))
        return "The wind answers."

    messages = send_message(storage, with_character, "Anyone?", narrator=narrator)
    assert messages[1].content == "The wind answers."
    assert calls == [("Anyone?", "Aria")]


def test_blank_chat_ignored(storage, session_id):
    before = len(storage.get_session(session_id).messages)
    assert send_message(storage, session_id, "   ") == []
    assert len(storage.get_session(session_id).messages) == before


def test_chat_missing_session(storage):
    with pytest.raises(SessionNotFoundError):
        send_message(storage, "nope", "Hello")


def test_blank_chat_missing_session(storage):
    with pytest.raises(SessionNotFoundError):
        send_message(storage, "nope", "   ")


def test_seq_keeps_increasing(storage, with_character):
    send_message(storage, with_character, "one")
    send_message(storage, with_character, "two")
    seqs = [m.seq for m in storage.get_session(with_character).messages]
    assert seqs == list(range(1, len(seqs) + 1))


# ── attempt_action ──────────────────────────────────────────


def test_action_without_character_skips_engine(storage, session_id, scripted):
    rng = scripted()
    result, messages = attempt_action(storage, session_id, "climbing", 5, rng=rng)
    assert result is None
    assert [(m.sender, m.content) for m in messages] == [("system", narration.NO_CHARACTER_ACTION)]
    assert rng.calls == []


def test_action_logs_roll_and_outcome(storage, with_character, scripted):
    # running → floor((3 + 4) / 2) = 3; 3 - 5 + (9 - 2) = 5
    result, messages = attempt_action(storage, with_character, "running", 5, rng=scripted(9, 2))
    assert result.success is True
    assert result.degree == 5
    assert result.description == "Clear success!"
    assert [m.sender for m in messages] == ["system", "dm"]
    assert messages[0].content == "Aria attempts to running (Difficulty: 5)...\n🎲 [+9] vs [-2] = Net: +7"
    assert messages[1].content == "Clear success! Your attempt to running succeeds dramatically."
    assert storage.get_session(with_character).messages[-2:] == messages


def test_action_dramatic_degree(storage, with_character, scripted):
    _, messages = attempt_action(
        storage, with_character, "running", 5, rng=scripted(9, 2), dramatic_degree=5
    )
    assert messages[1].content == "Clear success! Your attempt to running succeeds."


def test_action_exploded_failure(storage, with_character, scripted):
    # lifting → strength 5; 5 - 6 + (1 - (10 + 8)) = -18
    result, messages = attempt_action(storage, with_character, "lifting", 6, rng=scripted(1, 10, 8))
    assert result.success is False
    assert result.description == "Catastrophic failure! (Exploding dice!)"
    assert messages[0].content.endswith("Net: -17 (Exploded!)")
    assert "fails dramatically" in messages[1].content


def test_action_does_not_change_character(storage, with_character):
    before = storage.get_session(with_character).character
    attempt_action(storage, with_character, "fighting", 5, rng=random.Random(1))
    assert storage.get_session(with_character).character == before


def test_action_bad_difficulty(storage, with_character):
    with pytest.raises(ValueError):
        attempt_action(storage, with_character, "fighting", float("inf"))


def test_action_missing_session(storage):
    with pytest.raises(SessionNotFoundError):
        attempt_action(storage, "nope", "fighting", 5)
