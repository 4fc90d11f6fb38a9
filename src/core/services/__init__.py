"""
Business services for the bookings API.

- bookings.py: booking create/scan/query and user expansion
- users.py: user create/scan and batch lookup
- items.py: typed attribute encoding and scan/query paging
"""

__all__: list[str] = []
