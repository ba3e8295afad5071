"""Cyclic win/lose/draw rules for odd-sized move sets."""

from __future__ import annotations

from enum import Enum


class Outcome(Enum):
    """Round result from the human's perspective."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


def _check(index: int, n: int) -> None:
    if n < 3 or n % 2 == 0:
        raise ValueError(f"Move count must be odd and at least 3, got {n}")
    if not 1 <= index <= n:
        raise ValueError(f"Move index {index} out of range 1-{n}")


def judge(user_index: int, computer_index: int, n: int) -> Outcome:
    """Judge one round on a cycle of n moves.

    A move beats the (n - 1) // 2 moves that sit 1..(n - 1) // 2 positions
    before it on the cycle and loses to the rest. With n=3 this is classic
    rock-paper-scissors for the order (rock, paper, scissors).

    Args:
        user_index: Human move, 1-based
        computer_index: Computer move, 1-based
        n: Number of moves

    Returns:
        Outcome for the human
    """
    _check(user_index, n)
    _check(computer_index, n)

    distance = (user_index - computer_index) % n
    if distance == 0:
        return Outcome.DRAW
    if distance <= (n - 1) // 2:
        return Outcome.WIN
    return Outcome.LOSE


def beats(index: int, n: int) -> list[int]:
    """Indices the move at ``index`` defeats, in menu order."""
    return [other for other in range(1, n + 1) if judge(index, other, n) is Outcome.WIN]


def outcome_matrix(n: int) -> list[list[Outcome]]:
    """Full n x n matrix where cell [row][col] is judge(row + 1, col + 1, n)."""
    return [
        [judge(row, col, n) for col in range(1, n + 1)]
        for row in range(1, n + 1)
    ]
