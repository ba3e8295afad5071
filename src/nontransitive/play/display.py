"""Terminal display for menus, round results and the help table."""

from __future__ import annotations

from nontransitive.game.moves import MoveSet
from nontransitive.game.rules import Outcome, judge


RESULT_MESSAGES = {
    Outcome.WIN: "You win!",
    Outcome.LOSE: "You lose!",
    Outcome.DRAW: "It's a draw!",
}


class MenuPresenter:
    """Presents the numbered move menu."""

    def present(self, moves: MoveSet) -> str:
        lines: list[str] = ["Available moves:"]
        for index, name in moves.indexed():
            lines.append(f"{index} - {name}")
        lines.append("0 - exit")
        lines.append("? - help")
        return "\n".join(lines)


class RoundReporter:
    """Reports a judged round and reveals the key."""

    def report(self, human_move: str, computer_move: str, outcome: Outcome, key: str) -> str:
        """Render the end-of-round report."""
        return "\n".join([
            f"Your move: {human_move}",
            f"Computer move: {computer_move}",
            RESULT_MESSAGES[outcome],
            f"Secret key was used: {key}",
        ])


class HelpTableRenderer:
    """Renders the pairwise outcome table for a move set.

    Cell (row, column) holds judge(row, column) for the two moves.
    """

    CORNER = "v PC\\User >"

    def render(self, moves: MoveSet) -> str:
        """Render the full help table."""
        n = len(moves)
        divider = self._divider(n)

        lines: list[str] = ["Help Table:"]
        lines.append(divider)
        lines.append(
            f"| {self.CORNER} |" + "".join(f" {name.ljust(7)}|" for name in moves)
        )
        lines.append(divider)

        for row_index, row_name in moves.indexed():
            cells = "".join(
                f" {judge(row_index, col_index, n).value.ljust(5)} |"
                for col_index, _ in moves.indexed()
            )
            lines.append(f"| {row_name.ljust(14)} |" + cells)
            lines.append(divider)

        return "\n".join(lines)

    def _divider(self, n: int) -> str:
        return "+-------------+" + "--------+" * n
