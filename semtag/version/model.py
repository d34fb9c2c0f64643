"""Version value model.

A version is one of three immutable variants:

- Release: a tagged major.minor.patch release
- PreRelease: a build some commits past a release, pinned to a commit hash
- Dirty: any version computed while the working tree had local changes

Usage:
    from semtag.version.model import Release, PreRelease, Dirty, release_part

    match version:
        case Release(major, minor, patch):
            ...
        case PreRelease(release=base, distance=n):
            ...
        case Dirty(inner):
            ...

    previous = release_part(version)
    upcoming = previous.next_minor()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from semtag.version.errors import InvalidVersionError

__all__ = [
    "Bump",
    "Dirty",
    "MIN_COMMIT_LENGTH",
    "PreRelease",
    "Release",
    "Version",
    "dirty",
    "initial",
    "is_dirty",
    "pre_release",
    "release",
    "release_part",
]

Bump = Literal["major", "minor", "patch"]

# Git's own recommendation for abbreviated object names.
MIN_COMMIT_LENGTH = 7


@dataclass(frozen=True, slots=True, order=True)
class Release:
    """A released version with standard semantic versioning components."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        if self.major < 0:
            raise InvalidVersionError(f"Major version must be non-negative: {self.major}")
        if self.minor < 0:
            raise InvalidVersionError(f"Minor version must be non-negative: {self.minor}")
        if self.patch < 0:
            raise InvalidVersionError(f"Patch version must be non-negative: {self.patch}")

    def next_major(self) -> Release:
        return Release(self.major + 1, 0, 0)

    def next_minor(self) -> Release:
        return Release(self.major, self.minor + 1, 0)

    def next_patch(self) -> Release:
        return Release(self.major, self.minor, self.patch + 1)

    def bump(self, kind: Bump) -> Release:
        match kind:
            case "major":
                return self.next_major()
            case "minor":
                return self.next_minor()
            case "patch":
                return self.next_patch()
            case _:
                raise AssertionError(f"unexpected bump kind: {kind}")


@dataclass(frozen=True, slots=True)
class PreRelease:
    """A version `distance` commits past `release`, identified by `commit`.

    Attributes:
        release: The last release this build descends from
        distance: Number of commits since that release (always > 0)
        commit: Abbreviated commit hash, at least MIN_COMMIT_LENGTH characters
    """

    release: Release
    distance: int
    commit: str

    def __post_init__(self) -> None:
        if self.distance <= 0:
            raise InvalidVersionError(
                f"Distance must be greater than zero for a pre-release: {self.distance}"
            )
        if len(self.commit) < MIN_COMMIT_LENGTH:
            raise InvalidVersionError(
                f"Commit hash should be at least {MIN_COMMIT_LENGTH} characters: {self.commit!r}"
            )


@dataclass(frozen=True, slots=True)
class Dirty:
    """Marks a version computed while uncommitted changes were present."""

    inner: Version


type Version = Release | PreRelease | Dirty


def initial() -> Release:
    """Release used by callers when a repository carries no version tag yet."""
    return Release(0, 0, 1)


def release(major: int, minor: int, patch: int) -> Release:
    return Release(major, minor, patch)


def pre_release(base: Release, distance: int, commit: str) -> PreRelease:
    return PreRelease(base, distance, commit)


def dirty(version: Version) -> Dirty:
    return Dirty(version)


def release_part(version: Version) -> Release:
    """Return the Release underneath any version.

    Used to get a handle on the previous release from the current version
    before incrementing it.
    """
    match version:
        case Release():
            return version
        case PreRelease(release=base):
            return base
        case Dirty(inner=inner):
            return release_part(inner)
        case _:
            raise AssertionError(f"unexpected version variant: {version!r}")


def is_dirty(version: Version) -> bool:
    return isinstance(version, Dirty)
