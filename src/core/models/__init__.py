"""
Pydantic models for the bookings API.
"""

from core.models.booking import Booking, CreateBookingRequest, ExpandedBooking
from core.models.user import CreateUserRequest, User

__all__ = ["Booking", "CreateBookingRequest", "ExpandedBooking", "CreateUserRequest", "User"]
