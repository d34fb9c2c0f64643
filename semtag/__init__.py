"""Semantic versions from version-control tags."""

__version__ = "0.1.0"
