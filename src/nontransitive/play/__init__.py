"""Interactive human-vs-computer play."""

from nontransitive.play.display import HelpTableRenderer, MenuPresenter, RoundReporter
from nontransitive.play.input import HumanPlayer, InputResult
from nontransitive.play.session import GameSession, RoundRecord, RoundState, SessionConfig

__all__ = [
    "HelpTableRenderer",
    "MenuPresenter",
    "RoundReporter",
    "HumanPlayer",
    "InputResult",
    "GameSession",
    "RoundRecord",
    "RoundState",
    "SessionConfig",
]
