"""Game session management."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from nontransitive.fairness.commitment import commit
from nontransitive.fairness.keys import generate_secret_key, random_move_index
from nontransitive.game.moves import MoveSet
from nontransitive.game.rules import Outcome, judge
from nontransitive.play.display import HelpTableRenderer, MenuPresenter, RoundReporter
from nontransitive.play.input import HumanPlayer

logger = logging.getLogger(__name__)


class RoundState(Enum):
    """States of the round loop."""

    AWAITING_START = "awaiting_start"
    COMMIT_PUBLISHED = "commit_published"
    AWAITING_INPUT = "awaiting_input"
    JUDGED = "judged"
    TERMINATED = "terminated"


@dataclass
class SessionConfig:
    """Configuration for a game session."""

    max_rounds: Optional[int] = None  # None plays until the human exits
    show_menu: bool = True


@dataclass(frozen=True)
class RoundRecord:
    """A finished round, including the revealed key."""

    round_no: int
    commitment: str
    key: str
    computer_move: str
    human_move: str
    outcome: Outcome


class GameSession:
    """Plays commit-reveal rounds against the human until they exit.

    Each round the computer draws a fresh key and a move, publishes the
    HMAC of the move, and only reveals the key after the human has moved.
    """

    def __init__(
        self,
        moves: MoveSet,
        config: Optional[SessionConfig] = None,
        human: Optional[HumanPlayer] = None,
        key_fn: Optional[Callable[[], str]] = None,
        pick_fn: Optional[Callable[[int], int]] = None,
    ):
        """Initialize session."""
        self.moves = moves
        self.config = config or SessionConfig()
        self.key_fn = key_fn or generate_secret_key
        self.pick_fn = pick_fn or random_move_index

        # Components
        self.human_input = human or HumanPlayer()
        self.menu = MenuPresenter()
        self.reporter = RoundReporter()
        self.help_table = HelpTableRenderer()

        # Session state
        self.state = RoundState.AWAITING_START
        self.history: list[RoundRecord] = []

        # Current round, held only in memory until the reveal
        self._key: Optional[str] = None
        self._computer_index: Optional[int] = None
        self._commitment: Optional[str] = None

    def run(self, output_fn: Callable[[str], None] = print) -> list[RoundRecord]:
        """Run rounds until the human exits.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            Records of every judged round
        """
        while self.state is not RoundState.TERMINATED:
            if self.state in (RoundState.AWAITING_START, RoundState.JUDGED):
                if self._round_limit_reached():
                    self.state = RoundState.TERMINATED
                    continue
                self._publish_commitment(output_fn)

            elif self.state is RoundState.COMMIT_PUBLISHED:
                if self.config.show_menu:
                    output_fn(self.menu.present(self.moves))
                self.state = RoundState.AWAITING_INPUT

            elif self.state is RoundState.AWAITING_INPUT:
                self._handle_input(output_fn)

        logger.debug(f"Session terminated after {len(self.history)} round(s)")
        return self.history

    def _round_limit_reached(self) -> bool:
        limit = self.config.max_rounds
        return limit is not None and len(self.history) >= limit

    def _publish_commitment(self, output_fn: Callable[[str], None]) -> None:
        """Draw key and computer move, then publish the commitment."""
        self._key = self.key_fn()
        self._computer_index = self.pick_fn(len(self.moves))
        self._commitment = commit(self.moves.name_of(self._computer_index), self._key)

        logger.debug(f"Round {len(self.history) + 1}: commitment {self._commitment}")
        output_fn(f"HMAC: {self._commitment}")
        self.state = RoundState.COMMIT_PUBLISHED

    def _handle_input(self, output_fn: Callable[[str], None]) -> None:
        """Read one line and advance the state machine."""
        result = self.human_input.get_move(len(self.moves))

        if result.quit:
            output_fn("Exiting the game...")
            self.state = RoundState.TERMINATED
            return

        if result.help:
            output_fn(self.help_table.render(self.moves))
            return

        if result.error:
            output_fn(result.error)
            return

        if result.move_index is not None:
            self._judge_round(result.move_index, output_fn)

    def _judge_round(self, human_index: int, output_fn: Callable[[str], None]) -> None:
        """Judge the round and reveal the key."""
        assert self._key is not None and self._computer_index is not None
        assert self._commitment is not None

        outcome = judge(human_index, self._computer_index, len(self.moves))
        human_move = self.moves.name_of(human_index)
        computer_move = self.moves.name_of(self._computer_index)

        output_fn(self.reporter.report(human_move, computer_move, outcome, self._key))

        record = RoundRecord(
            round_no=len(self.history) + 1,
            commitment=self._commitment,
            key=self._key,
            computer_move=computer_move,
            human_move=human_move,
            outcome=outcome,
        )
        self.history.append(record)
        logger.debug(f"Round {record.round_no}: {human_move} vs {computer_move} -> {outcome.value}")

        self._key = None
        self._computer_index = None
        self._commitment = None
        self.state = RoundState.JUDGED
