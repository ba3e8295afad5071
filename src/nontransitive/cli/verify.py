"""CLI command for checking a revealed key against a published HMAC."""

from __future__ import annotations

import sys

import click

from nontransitive.fairness.commitment import verify


@click.command()
@click.argument("commitment")
@click.argument("key")
@click.argument("move")
def main(commitment: str, key: str, move: str):
    """Check that MOVE under the revealed KEY reproduces COMMITMENT."""
    try:
        matches = verify(commitment, move, key)
    except ValueError:
        raise click.BadParameter("key must be a hex string", param_hint="KEY")

    if matches:
        click.echo("Commitment verified.")
        return

    click.echo("Commitment does NOT match.")
    sys.exit(1)


if __name__ == "__main__":
    main()
