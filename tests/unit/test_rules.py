"""Tests for the cyclic winner rules."""

import pytest
from nontransitive.game.rules import Outcome, beats, judge, outcome_matrix

ROCK, PAPER, SCISSORS = 1, 2, 3

# rock, spock, paper, lizard, scissors
RPSLS = ["rock", "spock", "paper", "lizard", "scissors"]
RPSLS_BEATS = {
    "rock": {"lizard", "scissors"},
    "spock": {"rock", "scissors"},
    "paper": {"rock", "spock"},
    "lizard": {"spock", "paper"},
    "scissors": {"paper", "lizard"},
}


class TestClassicTable:
    def test_rock_beats_scissors(self):
        assert judge(ROCK, SCISSORS, 3) is Outcome.WIN
        assert judge(SCISSORS, ROCK, 3) is Outcome.LOSE

    def test_paper_beats_rock(self):
        assert judge(PAPER, ROCK, 3) is Outcome.WIN
        assert judge(ROCK, PAPER, 3) is Outcome.LOSE

    def test_scissors_beats_paper(self):
        assert judge(SCISSORS, PAPER, 3) is Outcome.WIN
        assert judge(PAPER, SCISSORS, 3) is Outcome.LOSE

    def test_same_move_draws(self):
        for move in (ROCK, PAPER, SCISSORS):
            assert judge(move, move, 3) is Outcome.DRAW


class TestFiveMoveTable:
    def test_matches_rock_paper_scissors_lizard_spock(self):
        for i, name in enumerate(RPSLS, start=1):
            defeated = {RPSLS[j - 1] for j in beats(i, 5)}
            assert defeated == RPSLS_BEATS[name]

    def test_each_move_wins_two_and_loses_two(self):
        for i in range(1, 6):
            results = [judge(i, j, 5) for j in range(1, 6) if j != i]
            assert results.count(Outcome.WIN) == 2
            assert results.count(Outcome.LOSE) == 2


class TestPreconditions:
    @pytest.mark.parametrize("n", [1, 2, 4])
    def test_rejects_bad_move_count(self, n):
        with pytest.raises(ValueError):
            judge(1, 1, n)

    @pytest.mark.parametrize("index", [0, 4, -1])
    def test_rejects_out_of_range_index(self, index):
        with pytest.raises(ValueError):
            judge(index, 1, 3)
        with pytest.raises(ValueError):
            judge(1, index, 3)


class TestOutcomeMatrix:
    def test_shape_and_diagonal(self):
        matrix = outcome_matrix(7)
        assert len(matrix) == 7
        assert all(len(row) == 7 for row in matrix)
        assert all(matrix[i][i] is Outcome.DRAW for i in range(7))

    def test_cells_match_judge(self):
        matrix = outcome_matrix(3)
        assert matrix[ROCK - 1][SCISSORS - 1] is Outcome.WIN
        assert matrix[ROCK - 1][PAPER - 1] is Outcome.LOSE
