"""Next command - compute the next release tag from the last described one."""

from __future__ import annotations

import typer

from semtag.cli.commands._helpers import exit_with_error, parse_or_exit, resolve_dialect
from semtag.cli.context import CLIContext, build_context
from semtag.version.increment import BUMP_KINDS, next_release, parse_bump, tag_message
from semtag.version.model import Bump, initial, is_dirty


def _resolve_bump(
    cli: CLIContext, bump: str | None, *, major: bool, minor: bool, patch: bool
) -> Bump:
    if bump is not None:
        kind = parse_bump(bump)
        if kind is None:
            exit_with_error(
                cli, f"unknown increment: {bump}", hint=f"expected one of: {', '.join(BUMP_KINDS)}"
            )
        return kind
    # Largest flag wins when several are given.
    if major:
        return "major"
    if minor:
        return "minor"
    if patch:
        return "patch"
    return cli.config.default_bump


def next_version(
    ctx: typer.Context,
    text: str | None = typer.Argument(
        None,
        help="Last described version, e.g. `git describe` output (omit when no tag exists yet)",
    ),
    bump: str | None = typer.Option(None, "--bump", "-b", help="Increment: major, minor or patch"),
    major: bool = typer.Option(False, "--major", help="Increment the major version"),
    minor: bool = typer.Option(False, "--minor", help="Increment the minor version"),
    patch: bool = typer.Option(False, "--patch", help="Increment the patch version"),
    dialect: str | None = typer.Option(
        None,
        "--dialect",
        "-d",
        help="Dialect of TEXT and of the printed tag (default: configured tag dialect)",
    ),
    message: str | None = typer.Option(
        None, "--message", "-m", help="Annotated tag message (default: configured template)"
    ),
) -> None:
    """Print the tag of the next release (default increment: patch)."""
    cli = build_context(ctx.obj)
    chosen = resolve_dialect(dialect, cli.config.tag_dialect, cli)
    kind = _resolve_bump(cli, bump, major=major, minor=minor, patch=patch)

    if text is None:
        previous = initial()
        cli.console.info(f"no version given, incrementing from {chosen.serialize(previous)}")
    else:
        previous = parse_or_exit(chosen, text, cli)
        if is_dirty(previous):
            cli.console.warning("working tree had uncommitted changes when this version was described")

    tag = chosen.serialize(next_release(previous, kind))
    typer.echo(tag)
    cli.console.info(
        f"tag message: {message if message is not None else tag_message(tag, cli.config.tag_message)}"
    )
