"""Human input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

EXIT_COMMAND = "0"
HELP_COMMAND = "?"
DEFAULT_PROMPT = 'Enter your move (or "0" to exit, "?" for help): '
INVALID_INPUT = "Invalid input. Please enter a valid move number."


@dataclass
class InputResult:
    """Result of human input."""

    move_index: Optional[int] = None
    quit: bool = False
    help: bool = False
    error: Optional[str] = None


class HumanPlayer:
    """Reads and classifies the human's menu choice."""

    def __init__(self, input_fn: Callable[[str], str] = input):
        self.input_fn = input_fn

    def get_move(self, move_count: int, prompt: str = DEFAULT_PROMPT) -> InputResult:
        """Get move from human input.

        Args:
            move_count: Number of moves on the menu (valid choices are 1..move_count)
            prompt: Input prompt string

        Returns:
            InputResult with move index, quit or help flag, or error
        """
        try:
            raw = self.input_fn(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        if raw == EXIT_COMMAND:
            return InputResult(quit=True)

        if raw == HELP_COMMAND:
            return InputResult(help=True)

        try:
            choice = int(raw)
        except ValueError:
            return InputResult(error=INVALID_INPUT)

        if choice < 1 or choice > move_count:
            return InputResult(error=INVALID_INPUT)

        return InputResult(move_index=choice)
