"""Tests for round resolution: traversal, tie-breaks and win bookkeeping."""

import pytest

from dicegame.core.dice import RandomDice, ScriptedDice
from dicegame.core.errors import ConfigurationError
from dicegame.core.events import DieRolled, EventRecorder, PlayerRolled
from dicegame.core.roster import Roster
from dicegame.core.round import RoundResolver


def _resolver(faces, num_dice=1, sink=None):
    return RoundResolver(ScriptedDice(faces), num_dice=num_dice, sink=sink)


class TestWinner:
    def test_highest_total_wins(self):
        roster = Roster.create(None, 3)
        assert _resolver([2, 6, 4]).resolve_round(roster, 0) == 1

    def test_winner_gets_one_win(self):
        roster = Roster.create(None, 3)
        _resolver([2, 6, 4]).resolve_round(roster, 0)
        assert roster.wins == [0, 1, 0]

    def test_totals_sum_all_dice(self):
        roster = Roster.create(None, 2)
        outcome = _resolver([1, 2, 3, 6, 6, 1], num_dice=3).play_round(roster, 0)
        assert outcome.totals == (6, 13)
        assert outcome.winner_position == 1
        assert outcome.winning_total == 13

    def test_totals_indexed_by_position_not_turn(self):
        roster = Roster.create(None, 3)
        # turn order 2, 0, 1
        outcome = _resolver([5, 1, 3]).play_round(roster, 2)
        assert outcome.totals == (1, 3, 5)
        assert outcome.turn_order == [2, 0, 1]


class TestTieBreak:
    def test_first_to_reach_max_keeps_lead(self):
        roster = Roster.create(["A", "B"], 2)
        # A: 4+4=8, B: 5+3=8
        winner = _resolver([4, 4, 5, 3], num_dice=2).resolve_round(roster, 0)
        assert winner == 0
        assert roster.wins == [1, 0]

    def test_tie_goes_to_earlier_in_rotation_not_lower_index(self):
        roster = Roster.create(None, 3)
        # start at 1: seat 1 -> 3, seat 2 -> 5, seat 0 -> 5
        winner = _resolver([3, 5, 5]).resolve_round(roster, 1)
        assert winner == 2

    def test_all_equal_starter_wins(self):
        roster = Roster.create(None, 4)
        assert _resolver([4, 4, 4, 4]).resolve_round(roster, 2) == 2

    def test_later_strictly_greater_takes_lead(self):
        roster = Roster.create(None, 3)
        assert _resolver([5, 5, 6]).resolve_round(roster, 0) == 2


class TestTraversal:
    def test_everyone_rolls_once_from_start(self):
        recorder = EventRecorder()
        roster = Roster.create(["A", "B", "C", "D"], 4)
        _resolver([1, 2, 3, 4], sink=recorder).resolve_round(roster, 2)
        order = [e.player_name for e in recorder.of_kind(PlayerRolled)]
        assert order == ["C", "D", "A", "B"]

    def test_out_of_range_start_wraps(self):
        roster = Roster.create(None, 3)
        outcome = _resolver([6, 1, 1]).play_round(roster, 4)
        assert outcome.start_position == 1
        assert outcome.winner_position == 1

    def test_die_events_per_die(self):
        recorder = EventRecorder()
        roster = Roster.create(["A", "B"], 2)
        _resolver([1, 2, 3, 4, 5, 6], num_dice=3, sink=recorder).resolve_round(roster, 0)
        dice = recorder.of_kind(DieRolled)
        assert [(d.player_name, d.die_index, d.face_value) for d in dice] == [
            ("A", 1, 1), ("A", 2, 2), ("A", 3, 3),
            ("B", 1, 4), ("B", 2, 5), ("B", 3, 6),
        ]

    def test_die_events_carry_wins_before_round(self):
        recorder = EventRecorder()
        roster = Roster.create(None, 2)
        resolver = _resolver([6, 1, 6, 1], sink=recorder)
        resolver.resolve_round(roster, 0)
        resolver.resolve_round(roster, 0)
        first_seat = [d.player_wins for d in recorder.of_kind(DieRolled) if d.player_name == "Player0"]
        assert first_seat == [0, 1]

    def test_round_numbers_increase(self):
        roster = Roster.create(None, 2)
        resolver = _resolver([1, 2, 3, 4])
        assert resolver.play_round(roster, 0).round_number == 1
        assert resolver.play_round(roster, 0).round_number == 2
        assert resolver.rounds_resolved == 2


class TestProperties:
    @pytest.mark.parametrize("players,dice", [(2, 1), (3, 2), (5, 1), (8, 4)])
    def test_winner_position_in_range(self, players, dice):
        resolver = RoundResolver(RandomDice(seed=players * 10 + dice), num_dice=dice)
        roster = Roster.create(None, players)
        for start in range(players * 3):
            assert 0 <= resolver.resolve_round(roster, start) < players

    @pytest.mark.parametrize("players", [2, 3, 6])
    def test_exactly_one_win_per_round(self, players):
        resolver = RoundResolver(RandomDice(seed=players), num_dice=2)
        roster = Roster.create(None, players)
        start = 0
        for _ in range(50):
            before = roster.wins
            start = resolver.resolve_round(roster, start)
            deltas = [after - b for after, b in zip(roster.wins, before)]
            assert sum(deltas) == 1
            assert deltas[start] == 1

    def test_zero_dice_rejected(self):
        with pytest.raises(ConfigurationError):
            RoundResolver(ScriptedDice([]), num_dice=0)

    def test_fractional_dice_rejected(self):
        with pytest.raises(ConfigurationError):
            RoundResolver(ScriptedDice([]), num_dice=1.5)
