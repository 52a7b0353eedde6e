"""Exceptions raised by the collaborators around the weather engine."""

from __future__ import annotations


class SkycastError(Exception):
    """Base exception for all Skycast collaborator errors."""


class ObservationUnavailable(SkycastError):
    """Raised when current conditions or forecast points cannot be fetched."""

    def __init__(self, reason: str, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or f"Weather data unavailable: {reason}")


class BackendUnavailable(SkycastError):
    """Raised when the conversational backend cannot produce a reply."""

    def __init__(self, reason: str, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or f"Conversational backend unavailable: {reason}")


__all__ = ["SkycastError", "ObservationUnavailable", "BackendUnavailable"]
