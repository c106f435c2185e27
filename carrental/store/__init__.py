"""
.. autoclasstree:: carrental.store

The store layer owns the records of the system. Each store wraps
the queries for a single model, so that the service layer never
builds a query itself. Lookups return ``None`` when nothing matches;
deciding whether that is an error is left to the caller.
"""

from .bookings import BookingStore
from .cars import CarStore
from .users import UserStore
