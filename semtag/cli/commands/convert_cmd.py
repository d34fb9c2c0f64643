"""Convert command - re-serialize a version in another dialect."""

from __future__ import annotations

import typer

from semtag.cli.commands._helpers import parse_or_exit, resolve_dialect
from semtag.cli.context import build_context
from semtag.version.model import initial


def convert(
    ctx: typer.Context,
    text: str | None = typer.Argument(
        None,
        help="Version text, e.g. `git describe` output (omit when no tag exists yet)",
    ),
    source: str | None = typer.Option(
        None, "--from", help="Dialect of TEXT (default: configured tag dialect)"
    ),
    target: str | None = typer.Option(
        None, "--to", help="Dialect to print (default: configured build dialect)"
    ),
) -> None:
    """Print TEXT in the target dialect, e.g. a build version from a tag."""
    cli = build_context(ctx.obj)
    src = resolve_dialect(source, cli.config.tag_dialect, cli)
    dst = resolve_dialect(target, cli.config.build_dialect, cli)

    if text is None:
        version = initial()
        cli.console.info(f"no version given, using initial release {dst.serialize(version)}")
    else:
        version = parse_or_exit(src, text, cli)

    typer.echo(dst.serialize(version))
