"""Regex-driven version parser shared by all dialects.

A parser holds two precompiled, fully anchored patterns:

- a release pattern with named groups `major`, `minor`, `patch`
- a pre-release pattern adding `distance` and `commit`

The release pattern is always tried first. Pre-release text ending in
`.dirty` is wrapped in Dirty.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from semtag.version.errors import IllegalVersionError
from semtag.version.model import Dirty, PreRelease, Release, Version

__all__ = [
    "COMMIT",
    "DIRTY_SUFFIX",
    "DISTANCE",
    "NUMBER",
    "RegexParser",
    "core_pattern",
]

# Non-negative integer without leading zeros.
NUMBER = r"0|[1-9][0-9]*"
# Strictly positive integer without leading zeros.
DISTANCE = r"[1-9][0-9]*"
COMMIT = r"[0-9a-z]{7,}"
DIRTY_SUFFIX = ".dirty"

_REQUIRED_GROUPS = frozenset({"major", "minor", "patch"})
_PRE_RELEASE_GROUPS = _REQUIRED_GROUPS | {"distance", "commit"}


def core_pattern() -> str:
    """Regex fragment for `major.minor.patch` with named groups."""
    return rf"(?P<major>{NUMBER})\.(?P<minor>{NUMBER})\.(?P<patch>{NUMBER})"


@dataclass(frozen=True, slots=True)
class RegexParser:
    """Version string parser over a release and a pre-release pattern.

    Patterns are matched with `fullmatch`, so a release pattern can never
    accept the prefix of a pre-release string.
    """

    release_pattern: re.Pattern[str]
    pre_release_pattern: re.Pattern[str]

    def __post_init__(self) -> None:
        missing = _REQUIRED_GROUPS - set(self.release_pattern.groupindex)
        if missing:
            raise ValueError(f"release pattern lacks named groups: {sorted(missing)}")
        missing = _PRE_RELEASE_GROUPS - set(self.pre_release_pattern.groupindex)
        if missing:
            raise ValueError(f"pre-release pattern lacks named groups: {sorted(missing)}")

    @classmethod
    def compile(cls, release_pattern: str, pre_release_pattern: str) -> RegexParser:
        # ASCII keeps `\d` in custom patterns from admitting other scripts' digits.
        return cls(
            re.compile(release_pattern, re.ASCII), re.compile(pre_release_pattern, re.ASCII)
        )

    def parse(self, text: str) -> Version:
        """Parse text into a Version.

        Raises:
            IllegalVersionError: text matches neither pattern, or a numeric
                component is too long to convert.
        """
        m = self.release_pattern.fullmatch(text)
        if m is not None:
            return self._release(m, text)

        m = self.pre_release_pattern.fullmatch(text)
        if m is not None:
            pre = PreRelease(
                self._release(m, text), _number(m, "distance", text), m.group("commit")
            )
            return Dirty(pre) if text.endswith(DIRTY_SUFFIX) else pre

        raise IllegalVersionError(text)

    def _release(self, m: re.Match[str], text: str) -> Release:
        return Release(
            _number(m, "major", text), _number(m, "minor", text), _number(m, "patch", text)
        )


def _number(m: re.Match[str], group: str, text: str) -> int:
    try:
        return int(m.group(group))
    except ValueError as e:
        # Digit strings past sys.get_int_max_str_digits() refuse conversion.
        raise IllegalVersionError(text) from e
