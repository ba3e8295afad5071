"""CLI command for playing against the computer."""

from __future__ import annotations

import logging
import sys

import click

from nontransitive.game.moves import InvalidMoveSetError, MoveSet
from nontransitive.play.session import GameSession, SessionConfig

logger = logging.getLogger(__name__)

USAGE_ERROR = "Incorrect parameters. Please provide an odd number of non-repeating strings."
USAGE_EXAMPLE = "Example: nontransitive rock paper scissors"


@click.command()
@click.argument("moves", nargs=-1)
@click.option(
    "--max-rounds",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many rounds (default: play until 0 is entered)",
)
@click.option("--no-menu", is_flag=True, help="Do not print the move menu each round")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    moves: tuple[str, ...],
    max_rounds: int | None,
    no_menu: bool,
    verbose: bool,
):
    """Play provably-fair rock-paper-scissors with any odd set of MOVES.

    Each round the computer's move is committed with an HMAC before you
    choose; the key is revealed afterwards so you can check it.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        move_set = MoveSet.from_args(moves)
    except InvalidMoveSetError as e:
        logger.debug(f"Rejected move set {list(moves)}: {e}")
        click.echo(USAGE_ERROR)
        click.echo(str(e))
        click.echo(USAGE_EXAMPLE)
        sys.exit(1)

    config = SessionConfig(max_rounds=max_rounds, show_menu=not no_menu)
    session = GameSession(move_set, config)
    session.run(output_fn=click.echo)


if __name__ == "__main__":
    main()
