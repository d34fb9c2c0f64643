"""Semantic version model, increment algebra and textual dialects.

Usage:
    from semtag.version import GIT_PORCELAIN, CANONICAL, next_release

    last = GIT_PORCELAIN.parse("v1.4.2-3-g1a2b3c4")
    CANONICAL.serialize(last)            # "1.4.2-alpha3+1a2b3c4"
    GIT_PORCELAIN.serialize(next_release(last, "minor"))  # "v1.5.0"
"""

from semtag.version.dialects import (
    CANONICAL,
    DIALECTS,
    GIT_PORCELAIN,
    Dialect,
    dialect_named,
)
from semtag.version.errors import IllegalVersionError, InvalidVersionError
from semtag.version.increment import (
    BUMP_KINDS,
    DEFAULT_BUMP,
    DEFAULT_TAG_MESSAGE,
    next_release,
    parse_bump,
    tag_message,
)
from semtag.version.model import (
    Bump,
    Dirty,
    PreRelease,
    Release,
    Version,
    dirty,
    initial,
    is_dirty,
    pre_release,
    release,
    release_part,
)
from semtag.version.parser import RegexParser

__all__ = [
    # model
    "Bump",
    "Dirty",
    "PreRelease",
    "Release",
    "Version",
    "dirty",
    "initial",
    "is_dirty",
    "pre_release",
    "release",
    "release_part",
    # errors
    "IllegalVersionError",
    "InvalidVersionError",
    # increment
    "BUMP_KINDS",
    "DEFAULT_BUMP",
    "DEFAULT_TAG_MESSAGE",
    "next_release",
    "parse_bump",
    "tag_message",
    # parsing
    "CANONICAL",
    "DIALECTS",
    "Dialect",
    "GIT_PORCELAIN",
    "RegexParser",
    "dialect_named",
]
