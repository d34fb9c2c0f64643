"""Textual dialects for versions.

Two dialects are provided:

- CANONICAL: SemVer-compliant build versions (`1.2.3`, `1.2.3-alpha4+abcdef0`).
  Round-trips: parse(serialize(v)) == v.
- GIT_PORCELAIN: tags and `git describe` output (`v1.2.3`, `v1.2.3-4-gabcdef0`).
  Parsing strips the `g` marker git puts before the abbreviated hash;
  serializing does not add it back.

Usage:
    from semtag.version.dialects import CANONICAL, GIT_PORCELAIN

    version = GIT_PORCELAIN.parse("v1.2.3-4-gabcdef0")
    CANONICAL.serialize(version)  # "1.2.3-alpha4+abcdef0"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from semtag.core.result import Err, Ok, Result
from semtag.version.errors import IllegalVersionError
from semtag.version.model import Dirty, PreRelease, Release, Version
from semtag.version.parser import COMMIT, DIRTY_SUFFIX, DISTANCE, RegexParser, core_pattern

__all__ = [
    "CANONICAL",
    "DIALECTS",
    "Dialect",
    "GIT_PORCELAIN",
    "dialect_named",
]


@dataclass(frozen=True, slots=True)
class Dialect:
    """A serializer/parser pair sharing one RegexParser.

    Attributes:
        name: Identifier used in configuration and on the command line
        parser: Precompiled release and pre-release patterns
        release_format: str.format template over major, minor, patch
        pre_release_format: str.format template over release, distance, commit
        examples: Sample texts accepted by `parse`, shown in error hints
    """

    name: str
    parser: RegexParser
    release_format: str
    pre_release_format: str
    examples: tuple[str, ...] = ()

    def parse(self, text: str) -> Version:
        return self.parser.parse(text)

    def parse_result(self, text: str) -> Result[Version, IllegalVersionError]:
        """Parse text, returning Err instead of raising on illegal input."""
        try:
            return Ok(self.parser.parse(text))
        except IllegalVersionError as e:
            return Err(e)

    def serialize(self, version: Version) -> str:
        match version:
            case Dirty(inner=inner):
                return f"{self.serialize(inner)}{DIRTY_SUFFIX}"
            case Release(major=major, minor=minor, patch=patch):
                return self.release_format.format(major=major, minor=minor, patch=patch)
            case PreRelease(release=base, distance=distance, commit=commit):
                return self.pre_release_format.format(
                    release=self.serialize(base), distance=distance, commit=commit
                )
            case _:
                raise AssertionError(f"unexpected version variant: {version!r}")


CANONICAL = Dialect(
    name="canonical",
    parser=RegexParser.compile(
        core_pattern(),
        rf"{core_pattern()}-alpha(?P<distance>{DISTANCE})\+(?P<commit>{COMMIT})(?:\.dirty)?",
    ),
    release_format="{major}.{minor}.{patch}",
    pre_release_format="{release}-alpha{distance}+{commit}",
    examples=("1.2.3", "1.2.3-alpha4+abcdef0", "1.2.3-alpha4+abcdef0.dirty"),
)

GIT_PORCELAIN = Dialect(
    name="git",
    parser=RegexParser.compile(
        rf"v{core_pattern()}",
        rf"v{core_pattern()}-(?P<distance>{DISTANCE})-g(?P<commit>{COMMIT})(?:\.dirty)?",
    ),
    release_format="v{major}.{minor}.{patch}",
    pre_release_format="{release}-{distance}-{commit}",
    examples=("v1.2.3", "v1.2.3-4-gabcdef0", "v1.2.3-4-gabcdef0.dirty"),
)

DIALECTS: Mapping[str, Dialect] = {
    CANONICAL.name: CANONICAL,
    GIT_PORCELAIN.name: GIT_PORCELAIN,
}


def dialect_named(name: str) -> Dialect | None:
    """Look up a dialect by name (case-insensitive)."""
    return DIALECTS.get(name.strip().lower())
