import pytest

from autodraft.exceptions import (
    DuplicatePlayerException,
    PlayerCountException,
    PlayerNameValidationException,
    PlayerNotFoundException,
)
from autodraft.utils.validation import (
    validate_draft_selection,
    validate_pairing_mode,
    validate_player_count,
    validate_player_name,
    validate_player_name_strict,
)


@pytest.mark.parametrize(
    "name, cleaned",
    [("Ana", "Ana"), ("  Ana   Maria ", "Ana Maria"), ("Zoë", "Zoë")],
)
def test_valid_names(name, cleaned):
    result = validate_player_name(name)
    assert result
    assert result.sanitized_value == cleaned


@pytest.mark.parametrize("name", [None, "", "   ", "x" * 41, "Ana\x00"])
def test_invalid_names(name):
    assert not validate_player_name(name)


def test_strict_name_raises_with_message():
    with pytest.raises(PlayerNameValidationException, match="Please enter a player name."):
        validate_player_name_strict(" ")


@pytest.mark.parametrize(
    "count, roster_size, valid",
    [(2, 2, True), (8, 10, True), (5, 4, False), (1, 8, False), (9, 9, False), (2, 1, False)],
)
def test_player_count(count, roster_size, valid):
    assert bool(validate_player_count(count, roster_size)) is valid


@pytest.mark.parametrize(
    "mode, count, valid",
    [
        ("random", 3, True),
        ("random", 8, True),
        ("structured", 4, True),
        ("structured", 6, False),
        ("bracket", 4, False),
    ],
)
def test_pairing_mode(mode, count, valid):
    assert bool(validate_pairing_mode(mode, count)) is valid


def test_selection_drops_empty_seats_before_counting():
    with pytest.raises(PlayerCountException, match="Please select a player for each slot."):
        validate_draft_selection(["a", None, "c"], 3, ["a", "b", "c"])


def test_selection_rejects_duplicates():
    with pytest.raises(DuplicatePlayerException, match="Each player can only be selected once."):
        validate_draft_selection(["a", "a"], 2, ["a", "b"])


def test_selection_rejects_unknown_ids():
    with pytest.raises(PlayerNotFoundException):
        validate_draft_selection(["a", "z"], 2, ["a", "b"])


def test_selection_keeps_seat_order():
    assert validate_draft_selection(["c", "a"], 2, ["a", "b", "c"]) == ["c", "a"]
