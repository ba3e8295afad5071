"""Integration tests for the command line entry points."""

import re

from click.testing import CliRunner
from nontransitive.cli import play, verify
from nontransitive.fairness.commitment import commit


def test_rejects_even_number_of_moves():
    result = CliRunner().invoke(play.main, ["rock", "paper", "scissors", "lizard"])

    assert result.exit_code != 0
    assert "odd number of non-repeating strings" in result.output
    assert "rock paper scissors" in result.output
    assert "HMAC:" not in result.output


def test_rejects_too_few_moves():
    result = CliRunner().invoke(play.main, ["rock", "paper"])

    assert result.exit_code == 1
    assert "odd number of non-repeating strings" in result.output


def test_rejects_duplicate_moves():
    result = CliRunner().invoke(play.main, ["rock", "rock", "paper"])

    assert result.exit_code == 1
    assert "repeat" in result.output


def test_exit_returns_zero():
    result = CliRunner().invoke(play.main, ["rock", "paper", "scissors"], input="0\n")

    assert result.exit_code == 0
    assert "Exiting the game..." in result.output


def test_round_against_scissors(monkeypatch):
    monkeypatch.setattr("nontransitive.play.session.random_move_index", lambda n: 3)
    monkeypatch.setattr("nontransitive.play.session.generate_secret_key", lambda: "c0" * 32)

    result = CliRunner().invoke(play.main, ["rock", "paper", "scissors"], input="1\n0\n")

    assert result.exit_code == 0
    assert "Your move: rock" in result.output
    assert "Computer move: scissors" in result.output
    assert "You win!" in result.output

    published = re.search(r"HMAC: ([0-9a-f]{64})", result.output).group(1)
    revealed = re.search(r"Secret key was used: ([0-9a-f]{64})", result.output).group(1)
    assert commit("scissors", revealed) == published


def test_help_table_from_cli():
    result = CliRunner().invoke(play.main, ["rock", "paper", "scissors"], input="?\n0\n")

    assert "Help Table:" in result.output
    assert "| v PC\\User > |" in result.output


def test_max_rounds_option():
    result = CliRunner().invoke(
        play.main, ["rock", "paper", "scissors", "--max-rounds", "1"], input="2\n"
    )

    assert result.exit_code == 0
    assert result.output.count("HMAC: ") == 1
    assert "Computer move: " in result.output


def test_verify_accepts_matching_reveal():
    key = "ab" * 32
    result = CliRunner().invoke(verify.main, [commit("lizard", key), key, "lizard"])

    assert result.exit_code == 0
    assert "Commitment verified." in result.output


def test_verify_rejects_other_move():
    key = "ab" * 32
    result = CliRunner().invoke(verify.main, [commit("lizard", key), key, "spock"])

    assert result.exit_code == 1
    assert "does NOT match" in result.output


def test_verify_reports_malformed_key():
    result = CliRunner().invoke(verify.main, ["00" * 32, "xyz", "rock"])

    assert result.exit_code == 2
