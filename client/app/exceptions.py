# client/app/exceptions.py
"""
Errors raised by booking flows.

Slot derivation never raises for bad availability data; these cover the
network collaborators and caller mistakes only.
"""

from typing import Any


class BookingClientError(Exception):
    """Base exception for booking client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class AvailabilityFetchError(BookingClientError):
    """No availability endpoint answered."""


class BookingSubmitError(BookingClientError):
    """Backend rejected or never received the session request."""


class SlotExpiredError(BookingClientError):
    """Chosen slot started before it was submitted."""
