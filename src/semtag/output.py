"""Output helpers separating human-facing messages from machine-readable output.

user_output writes to stderr so that stdout stays reserved for values other
tools consume (see machine_output).
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str, *, nl: bool = True) -> None:
    """Write machine-readable output to stdout."""
    click.echo(message, nl=nl)
