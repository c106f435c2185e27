"""
The models package contains all the models used on the server.

.. autoclasstree:: carrental.models
"""

from .booking import Booking, BookingStatus
from .car import Car
from .user import User, UserRole
