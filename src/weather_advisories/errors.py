"""Exceptions raised around the condition rule engine.

The engine itself raises none of these: it skips categories whose inputs
are missing and returns an empty list when nothing applies. These errors
belong to the collaborators that prepare its input and configuration.
"""

from __future__ import annotations


class AdvisoryError(Exception):
    """Base exception for weather advisory errors."""


class InvalidSnapshotError(AdvisoryError):
    """Raised when a snapshot fails plausibility checks."""

    def __init__(self, problems: list[str], city_name: str | None = None):
        location = f" for {city_name}" if city_name else ""
        super().__init__(f"Invalid weather snapshot{location}: {'; '.join(problems)}")
        self.problems = problems
        self.city_name = city_name


class SnapshotLoadError(AdvisoryError):
    """Raised when a snapshot cannot be read or parsed from a file."""

    def __init__(self, message: str, path: str):
        super().__init__(f"{message}: {path}")
        self.path = path


class UnknownCategoryError(AdvisoryError):
    """Raised when a preference names a category that does not exist."""

    def __init__(self, key: str):
        super().__init__(f"Unknown card category: '{key}'")
        self.key = key
