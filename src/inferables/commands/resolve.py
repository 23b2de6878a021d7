"""Resolve commands - confirm or decline candidates from the command line."""

import sys
from typing import Any

import click

from inferables.commands.common import describe, handle_error, json_option, to_json
from inferables.lib.errors import ConstraintViolation
from inferables.lib.variant import Variant
from inferables.models import Actual, GuessList, Unsolvable
from inferables.workflows import advance
from inferables.workflows import resolve as resolve_workflow


def _emit(state: Variant[Any], as_json: bool) -> None:
    """Print a state as text or JSON."""
    if as_json:
        click.echo(to_json(state))
    else:
        click.echo(describe(state))


@click.command()
@click.argument("candidates", nargs=-1, required=True)
@json_option
def resolve(candidates: tuple[str, ...], as_json: bool) -> None:
    """Offer each candidate in turn until one is accepted.

    CANDIDATES are tried in order, most preferred first.

    \b
    Examples:
      infer resolve red green blue
      infer resolve --json 8080 8081
    """
    result = resolve_workflow(
        candidates,
        lambda candidate: click.confirm(f"Accept '{candidate}'?", default=False, err=True),
    )

    match result:
        case Actual(value):
            if as_json:
                click.echo(to_json(result))
            else:
                click.secho(f"Confirmed: {value}", fg="green", bold=True)
        case Unsolvable():
            if as_json:
                click.echo(to_json(result))
            else:
                click.secho(describe(result), fg="red", err=True)
            sys.exit(1)


@click.command()
@click.argument("candidates", nargs=-1)
@click.option(
    "--declines",
    "-d",
    default=0,
    show_default=True,
    type=click.IntRange(min=0),
    help="Number of candidates to decline",
)
@click.option(
    "--confirm",
    "do_confirm",
    is_flag=True,
    help="Confirm the current candidate after declining",
)
@json_option
def walk(candidates: tuple[str, ...], declines: int, do_confirm: bool, as_json: bool) -> None:
    """Step a candidate list through declines and an optional confirm.

    \b
    Examples:
      infer walk a b c --declines 1
      infer walk a b c -d 2 --confirm
    """
    try:
        state = advance(GuessList(candidates), declines)
    except ConstraintViolation as e:
        handle_error(e)
        return

    if do_confirm:
        match state:
            case GuessList() as guesses:
                state = guesses.confirm()

    _emit(state, as_json)
