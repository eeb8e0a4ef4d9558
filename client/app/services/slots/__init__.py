# client/app/services/slots/__init__.py
"""
Slots derivation module.

Level 1: Bookable dates from weekly availability
Level 2: Time slots for a date and session duration
"""

from .config import BookingConfig, get_booking_config
from .clock import Clock, SystemClock, FixedClock
from .windows import AvailabilityWindow, check_availability, valid_windows
from .availability import compute_available_dates
from .calculator import TimeSlot, compute_time_slots

__all__ = [
    "BookingConfig",
    "get_booking_config",
    "Clock",
    "SystemClock",
    "FixedClock",
    "AvailabilityWindow",
    "check_availability",
    "valid_windows",
    "compute_available_dates",
    "TimeSlot",
    "compute_time_slots",
]
