import json

import pytest

from autodraft.constants import (
    NOTICE_CHAMPION,
    NOTICE_DRAFT_START,
    NOTICE_PLAYER_ADDED,
    NOTICE_ROUND_ADVANCE,
    RESULT_DRAW,
    ROSTER_STORAGE_KEY,
)
from autodraft.exceptions import (
    ByeResultException,
    DuplicatePlayerException,
    InvalidResultException,
    PairingModeException,
    PlayerCountException,
    PlayerNameValidationException,
    PlayerNotFoundException,
    RosterSaveException,
    SessionStateException,
)
from autodraft.tournament import SessionPhase, SessionState

MAX_BATTLES = 200


def report_all(controller, result_for=lambda p: p.player1.id):
    ready = False
    for index, pairing in enumerate(controller.session.pairings):
        if pairing.is_bye:
            continue
        ready = controller.set_result(index, result_for(pairing))
    return ready


def play_to_end(controller):
    for _ in range(MAX_BATTLES):
        if controller.phase is not SessionPhase.BATTLING:
            return
        report_all(controller)
        controller.end_battle()
    pytest.fail("game did not finish")


def test_begin_draft_starts_first_battle(controller, roster_ids, notifier):
    session = controller.begin_draft(roster_ids[:4])

    assert controller.phase is SessionPhase.BATTLING
    assert controller.session is session
    assert (session.round, session.battle, session.hand_size) == (1, 1, 3)
    assert len(session.pairings) == 2
    assert [p.id for p in session.players] == roster_ids[:4]
    assert all(p.poison == 0 and p.treasures == 1 for p in session.players)
    assert notifier.messages(NOTICE_DRAFT_START) == [
        "A new draft has begun with 4 players!"
    ]


def test_duplicate_selection_is_rejected(controller, roster_ids):
    selection = [roster_ids[0], roster_ids[1], roster_ids[0]]

    with pytest.raises(DuplicatePlayerException):
        controller.begin_draft(selection)

    assert controller.session is None
    assert controller.phase is SessionPhase.IDLE


def test_rejected_draft_keeps_running_session(controller, roster_ids):
    session = controller.begin_draft(roster_ids[:2])

    with pytest.raises(DuplicatePlayerException):
        controller.begin_draft([roster_ids[2], roster_ids[2]])

    assert controller.session is session


def test_empty_seat_is_rejected(controller, roster_ids):
    with pytest.raises(PlayerCountException):
        controller.begin_draft([roster_ids[0], "", roster_ids[2]], num_players=3)
    assert controller.session is None


@pytest.mark.parametrize("count", [1, 9])
def test_player_count_out_of_range(controller, roster_ids, count):
    with pytest.raises(PlayerCountException):
        controller.begin_draft((roster_ids * 2)[:count], num_players=count)


def test_unknown_player_is_rejected(controller, roster_ids):
    with pytest.raises(PlayerNotFoundException):
        controller.begin_draft([roster_ids[0], "Player_missing"])


def test_structured_mode_needs_four_players(controller, roster_ids):
    with pytest.raises(PairingModeException):
        controller.begin_draft(roster_ids[:5], pairing_mode="structured")

    session = controller.begin_draft(roster_ids[:4], pairing_mode="structured")
    assert session.pairing_mode == "structured"


def test_unknown_pairing_mode_is_rejected(controller, roster_ids):
    with pytest.raises(PairingModeException):
        controller.begin_draft(roster_ids[:4], pairing_mode="swiss")


def test_readiness_gate(controller, roster_ids):
    controller.begin_draft(roster_ids[:4])
    first = controller.session.pairings[0]

    with pytest.raises(SessionStateException):
        controller.end_battle()

    assert controller.set_result(0, first.player1.id) is False
    assert not controller.can_end_battle
    assert controller.set_result(1, RESULT_DRAW) is True
    assert controller.can_end_battle

    # results can be changed until the battle ends
    assert controller.set_result(0, first.player2.id) is True
    assert first.result == first.player2.id


def test_bye_pairing_cannot_be_reported(controller, roster_ids):
    controller.begin_draft(roster_ids[:3])
    pairings = controller.session.pairings
    bye_index = next(i for i, p in enumerate(pairings) if p.is_bye)
    bye_pairing = pairings[bye_index]

    with pytest.raises(ByeResultException):
        controller.set_result(bye_index, RESULT_DRAW)

    assert bye_pairing.result == bye_pairing.player1.id
    assert report_all(controller) is True


def test_invalid_results_are_rejected(controller, roster_ids):
    controller.begin_draft(roster_ids[:2])

    with pytest.raises(InvalidResultException):
        controller.set_result(0, roster_ids[5])
    with pytest.raises(InvalidResultException):
        controller.set_result(3, RESULT_DRAW)
    assert controller.session.pairings[0].result is None


def test_set_result_without_session(controller):
    with pytest.raises(SessionStateException):
        controller.set_result(0, RESULT_DRAW)


def test_round_advances_every_three_battles(controller, roster_ids, notifier):
    session = controller.begin_draft(roster_ids[:4])

    for _ in range(3):
        assert session.round == (session.battle - 1) // 3 + 1
        report_all(controller)
        controller.end_battle()

    assert session.battle == 4
    assert session.round == 2
    assert session.hand_size == 4
    assert session.is_new_round
    assert notifier.messages(NOTICE_ROUND_ADVANCE) == [
        "A new round begins! Hand size has increased to 4!"
    ]
    assert all(p.treasures == 4 for p in session.players)


def test_hand_size_stops_at_eight(controller, roster_ids, notifier):
    session = controller.begin_draft(roster_ids[:4])
    session.battle = 3
    session.hand_size = 8

    report_all(controller, lambda p: RESULT_DRAW)
    controller.end_battle()

    assert session.round == 2
    assert session.hand_size == 8
    assert notifier.messages(NOTICE_ROUND_ADVANCE) == []
    assert all(p.poison == 5 for p in session.players)


def test_full_game_updates_roster(controller, roster, roster_ids, storage, notifier):
    drafted = roster_ids[:5]
    controller.begin_draft(drafted)

    play_to_end(controller)

    assert controller.phase is SessionPhase.GAME_OVER
    standings = controller.final_standings
    champion = controller.champion
    assert champion is standings[0]
    assert champion.placement == 1
    assert [p.placement for p in standings].count(1) == 1
    assert all(p.placement is not None for p in standings)
    assert notifier.messages(NOTICE_CHAMPION) == [f"{champion.name} is the Champion!"]

    for player in roster.players:
        if player.id in drafted:
            assert player.stats.games_played == 1
            final = controller.session.get_player(player.id)
            assert player.stats.placements[final.placement] == 1
        else:
            assert player.stats.games_played == 0
    assert roster.get(champion.id).stats.wins == 1
    assert roster.get(champion.id).stats.elimination_rounds == {}

    saved = {p["id"]: p for p in json.loads(storage.get(ROSTER_STORAGE_KEY))}
    assert saved[champion.id]["stats"]["gamesPlayed"] == 1
    assert saved[champion.id]["stats"]["placements"]["1"] == 1


def test_finished_game_rejects_further_commands(controller, roster_ids):
    controller.begin_draft(roster_ids[:2])
    play_to_end(controller)

    with pytest.raises(SessionStateException):
        controller.set_result(0, RESULT_DRAW)
    with pytest.raises(SessionStateException):
        controller.end_battle()
    with pytest.raises(SessionStateException):
        controller.game_over(controller.champion)


def test_abandon_leaves_roster_untouched(controller, roster, roster_ids, storage):
    before = storage.get(ROSTER_STORAGE_KEY)
    controller.begin_draft(roster_ids[:4])
    report_all(controller)
    controller.end_battle()

    controller.abandon()

    assert controller.phase is SessionPhase.IDLE
    assert controller.standings() == []
    assert storage.get(ROSTER_STORAGE_KEY) == before
    assert all(p.stats.games_played == 0 for p in roster.players)


def test_seeded_drafts_repeat_pairings(controller, roster_ids):
    first = controller.begin_draft(roster_ids, seed=11)
    first_ids = [p.participant_ids for p in first.pairings]

    second = controller.begin_draft(roster_ids, seed=11)

    assert [p.participant_ids for p in second.pairings] == first_ids


def test_register_player_announces(controller, roster, notifier):
    player = controller.register_player("  Zed ")

    assert player.name == "Zed"
    assert len(roster) == 9
    assert notifier.messages(NOTICE_PLAYER_ADDED) == ["Zed has been added!"]


def test_register_player_rejects_blank_name(controller, roster):
    with pytest.raises(PlayerNameValidationException, match="Please enter a player name."):
        controller.register_player("   ")
    assert len(roster) == 8


def test_state_snapshot(controller, roster_ids):
    assert SessionState.compute(controller).instructions == "Start a draft to begin."

    controller.begin_draft(roster_ids[:4])
    state = SessionState.compute(controller)

    assert state.phase is SessionPhase.BATTLING
    assert (state.round, state.battle_in_round, state.hand_size) == (1, 1, 3)
    assert (state.reported, state.total_pairings) == (0, 2)
    assert not state.can_end_battle
    assert state.instructions == "Report results for Battle 1 of 3."


def test_state_on_new_round(controller, roster_ids):
    session = controller.begin_draft(roster_ids[:4])
    for _ in range(3):
        report_all(controller)
        controller.end_battle()

    state = SessionState.compute(controller)

    assert state.is_new_round
    assert state.instructions.startswith("This is a new round! First, draft new cards.")
    assert session.battle_in_round == 1


def test_failed_save_at_game_over_can_be_retried(controller, roster, roster_ids, storage):
    drafted = roster_ids[:3]
    controller.begin_draft(drafted)
    storage.failing = True

    with pytest.raises(RosterSaveException):
        play_to_end(controller)

    assert controller.phase is SessionPhase.GAME_OVER
    assert not controller.results_saved
    assert controller.champion.placement == 1
    saved = {p["id"]: p for p in json.loads(storage.get(ROSTER_STORAGE_KEY))}
    assert [saved[pid]["stats"]["gamesPlayed"] for pid in drafted] == [0, 0, 0]

    storage.failing = False
    controller.save_results()

    assert controller.results_saved
    saved = {p["id"]: p for p in json.loads(storage.get(ROSTER_STORAGE_KEY))}
    assert [saved[pid]["stats"]["gamesPlayed"] for pid in drafted] == [1, 1, 1]
    assert [roster.get(pid).stats.games_played for pid in drafted] == [1, 1, 1]


def test_successful_game_over_marks_results_saved(controller, roster_ids):
    controller.begin_draft(roster_ids[:2])
    assert not controller.results_saved

    play_to_end(controller)

    assert controller.results_saved


def test_save_results_needs_finished_game(controller, roster_ids):
    with pytest.raises(SessionStateException):
        controller.save_results()

    controller.begin_draft(roster_ids[:2])
    with pytest.raises(SessionStateException):
        controller.save_results()


def test_seed_only_applies_to_its_own_draft(controller, roster_ids):
    controller.begin_draft(roster_ids, seed=11)
    seeded = controller.session_pairing_generator
    assert seeded is not controller.pairing_generator

    controller.begin_draft(roster_ids)

    assert controller.session_pairing_generator is controller.pairing_generator


def test_register_player_failed_save_leaves_roster(controller, roster, storage, notifier):
    storage.failing = True

    with pytest.raises(RosterSaveException):
        controller.register_player("Zed")

    assert len(roster) == 8
    assert "Zed" not in [p.name for p in roster.players]
    assert notifier.messages(NOTICE_PLAYER_ADDED) == []
