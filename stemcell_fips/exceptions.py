"""Errors raised while evaluating a stemcell."""
from __future__ import annotations

from typing import Any, Iterable


class StemcellCheckError(Exception):
    """Base class of all errors raised by the checks and the suite."""


class AssetNotFound(StemcellCheckError):
    """Raised when a reference package list is missing.

    Attributes:
        asset_name: Name of the requested package list
        searched: Where the loader looked for it
    """

    def __init__(self, asset_name: str, searched: str | None = None):
        message = f"Package list not found: {asset_name}"
        if searched:
            message += f" (searched in {searched})"
        super().__init__(message)
        self.asset_name = asset_name
        self.searched = searched


class AssertionMismatch(StemcellCheckError):
    """Raised when the observed state of the image differs from the expected one.

    Attributes:
        message: Human-readable description of the mismatch
        details: Diff of the mismatch, e.g. ``missing``/``extra`` for package sets
            or ``content`` with the non-matching text for pattern checks
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NoScenarioApplicable(StemcellCheckError):
    """Raised when no scenario includes the current platform."""

    def __init__(self, platform: Any):
        super().__init__(f"No package scenario applies to platform {platform}")
        self.platform = platform


class AmbiguousScenario(StemcellCheckError):
    """Raised when more than one scenario includes the current platform."""

    def __init__(self, platform: Any, scenarios: Iterable[str]):
        self.scenarios = sorted(scenarios)
        super().__init__(f"Platform {platform} is included in several scenarios: {', '.join(self.scenarios)}")
        self.platform = platform


class UnknownPlatform(StemcellCheckError, ValueError):
    """Raised when a platform identifier is not one of the supported platforms."""

    def __init__(self, identifier: str):
        super().__init__(f"Unknown platform: {identifier}")
        self.identifier = identifier


class AssetUnreadable(StemcellCheckError):
    """Raised when a reference package list exists but cannot be read or is not valid UTF-8."""

    def __init__(self, asset_name: str, reason: str):
        super().__init__(f"Package list {asset_name} cannot be read: {reason}")
        self.asset_name = asset_name
        self.reason = reason
