"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from semtag.core.errors import ErrorCode
from semtag.core.result import Err, Ok
from semtag.output.console import Style
from semtag.version.dialects import DIALECTS, Dialect, dialect_named
from semtag.version.model import Version

if TYPE_CHECKING:
    from semtag.cli.context import CLIContext


def exit_with_error(
    ctx: CLIContext,
    message: str,
    *,
    hint: str | None = None,
    code: ErrorCode = ErrorCode.USER_ERROR,
) -> NoReturn:
    ctx.console.error(message)
    if hint:
        ctx.console.print(f"hint: {hint}", Style.DIM)
    raise typer.Exit(code=int(code))


def resolve_dialect(name: str | None, default: Dialect, ctx: CLIContext) -> Dialect:
    """Return the dialect named on the command line, or `default`."""
    if name is None:
        return default
    dialect = dialect_named(name)
    if dialect is None:
        exit_with_error(
            ctx,
            f"unknown dialect: {name}",
            hint=f"expected one of: {', '.join(DIALECTS)}",
        )
    return dialect


def parse_or_exit(dialect: Dialect, text: str, ctx: CLIContext) -> Version:
    """Parse text with `dialect`, exiting with USER_ERROR if it is illegal."""
    match dialect.parse_result(text.strip()):
        case Ok(version):
            return version
        case Err(error):
            exit_with_error(
                ctx,
                str(error),
                hint=f"'{dialect.name}' versions look like {' or '.join(dialect.examples)}",
            )
