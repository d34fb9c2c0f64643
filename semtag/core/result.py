"""Result type for explicit error handling at the edges.

Operations that can fail for reasons outside the caller's control (reading
a config file, parsing user-supplied version text) return Ok or Err
instead of raising, so command handlers deal with both outcomes in one
`match`:

    match GIT_PORCELAIN.parse_result(text):
        case Ok(version):
            ...
        case Err(error):
            console.error(str(error))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

__all__ = ["Err", "Ok", "Result"]

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying `value`."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying `error`."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
