"""Release increment policy.

Computes the next release from the last tagged version, defaulting to a
patch increment when the caller does not ask for anything else.
"""

from __future__ import annotations

from typing import get_args

from semtag.version.model import Bump, Release, Version, release_part

__all__ = [
    "BUMP_KINDS",
    "DEFAULT_BUMP",
    "DEFAULT_TAG_MESSAGE",
    "next_release",
    "parse_bump",
    "tag_message",
]

BUMP_KINDS: tuple[Bump, ...] = get_args(Bump)
DEFAULT_BUMP: Bump = "patch"
DEFAULT_TAG_MESSAGE = "Release version: {tag}"


def parse_bump(text: str) -> Bump | None:
    value = text.strip().lower()
    for kind in BUMP_KINDS:
        if kind == value:
            return kind
    return None


def next_release(version: Version, kind: Bump = DEFAULT_BUMP) -> Release:
    """Return the release that follows `version`.

    Pre-release and dirty versions increment from the release they descend
    from, so `v1.2.3-4-gabcdef0` with a minor bump yields `1.3.0`.
    """
    return release_part(version).bump(kind)


def tag_message(tag: str, template: str = DEFAULT_TAG_MESSAGE) -> str:
    """Render the annotated tag message for `tag`."""
    return template.format(tag=tag)
