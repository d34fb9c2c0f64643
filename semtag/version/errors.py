"""Error types for the version model and its textual dialects."""

from __future__ import annotations

__all__ = ["IllegalVersionError", "InvalidVersionError"]


class InvalidVersionError(ValueError):
    """A version value was constructed with fields that break its invariants.

    This signals a programming error on the caller side (negative component,
    non-positive distance, abbreviated commit that is too short), never a
    parse failure.
    """


class IllegalVersionError(ValueError):
    """Version text matched none of the patterns of the selected dialect.

    Attributes:
        text: The offending input, kept verbatim for diagnostics.
    """

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Unable to parse version string {text!r} into one of the supported version formats."
        )
        self.text = text
