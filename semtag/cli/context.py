from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from semtag.core.config import Config, discover_config, load_config
from semtag.core.errors import ErrorCode
from semtag.core.result import Err
from semtag.output.console import ConsoleProtocol, RichConsole, Style


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    config_path: Path | None
    console: ConsoleProtocol


def build_context(
    config_path: Path | None = None,
    *,
    console: ConsoleProtocol | None = None,
) -> CLIContext:
    """Resolve configuration for a command.

    An explicit path must load; otherwise the working directory is searched
    and defaults apply when nothing is found.
    """
    out = console if console is not None else RichConsole()
    path = config_path if config_path is not None else discover_config(Path.cwd())
    if path is None:
        return CLIContext(config=Config(), config_path=None, console=out)

    result = load_config(path)
    if isinstance(result, Err):
        out.error(result.error.message)
        if result.error.hint:
            out.print(f"hint: {result.error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return CLIContext(config=result.value, config_path=path, console=out)
