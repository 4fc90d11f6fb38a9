"""
Core business logic package for the bookings API.

All validation, data access, and error reporting live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
