"""Parse command - validate version text and show its fields."""

from __future__ import annotations

import typer

from semtag.cli.commands._helpers import parse_or_exit, resolve_dialect
from semtag.cli.context import build_context
from semtag.version.model import Dirty, PreRelease, Release, Version


def describe(version: Version) -> list[tuple[str, str]]:
    """Return (label, value) rows for a version, outermost variant first."""
    match version:
        case Dirty(inner=inner):
            rows = describe(inner)
            return [(label, "yes" if label == "dirty" else value) for label, value in rows]
        case Release(major=major, minor=minor, patch=patch):
            return [
                ("kind", "release"),
                ("major", str(major)),
                ("minor", str(minor)),
                ("patch", str(patch)),
                ("dirty", "no"),
            ]
        case PreRelease(release=base, distance=distance, commit=commit):
            rows = describe(base)
            return [
                ("kind", "pre-release"),
                *[row for row in rows if row[0] in ("major", "minor", "patch")],
                ("distance", str(distance)),
                ("commit", commit),
                ("dirty", "no"),
            ]
        case _:
            raise AssertionError(f"unexpected version variant: {version!r}")


def parse(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Version text to parse"),
    dialect: str | None = typer.Option(
        None,
        "--dialect",
        "-d",
        help="Dialect of TEXT: canonical or git (default: configured tag dialect)",
    ),
) -> None:
    """Parse a version and show its components."""
    cli = build_context(ctx.obj)
    chosen = resolve_dialect(dialect, cli.config.tag_dialect, cli)
    version = parse_or_exit(chosen, text, cli)
    cli.console.table(f"{text.strip()} ({chosen.name})", describe(version))
