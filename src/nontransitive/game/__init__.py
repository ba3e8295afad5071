"""Move sets and the cyclic winner rules."""

from nontransitive.game.moves import MoveSet, InvalidMoveSetError
from nontransitive.game.rules import Outcome, judge, beats, outcome_matrix

__all__ = [
    "MoveSet",
    "InvalidMoveSetError",
    "Outcome",
    "judge",
    "beats",
    "outcome_matrix",
]
