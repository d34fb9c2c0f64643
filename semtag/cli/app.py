from __future__ import annotations

from pathlib import Path

import typer

from semtag import __version__
from semtag.cli.commands.convert_cmd import convert
from semtag.cli.commands.next_cmd import next_version
from semtag.cli.commands.parse_cmd import parse


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(parse)
app.command()(convert)
app.command("next")(next_version)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        envvar="SEMTAG_CONFIG",
        help="Config file (default: semtag.toml or pyproject.toml in the current directory)",
    ),
) -> None:
    ctx.obj = config


def main() -> None:
    app()
