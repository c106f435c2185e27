"""
Booking
---------------------------

A booking holds a car for a user between two calendar dates.

A booking starts out as :attr:`~BookingStatus.BOOKED` and may move
to :attr:`~BookingStatus.CANCELLED`, which is terminal.
"""
from enum import Enum
from typing import Dict, Any

from tortoise import Model, fields


class BookingStatus(str, Enum):
    BOOKED = "BOOKED"
    CANCELLED = "CANCELLED"


class Booking(Model):
    id = fields.IntField(primary_key=True)
    user = fields.ForeignKeyField("models.User", related_name="bookings", on_delete=fields.CASCADE)
    car = fields.ForeignKeyField("models.Car", related_name="bookings", on_delete=fields.CASCADE)

    start_date = fields.DateField()
    end_date = fields.DateField()

    total_price = fields.DecimalField(max_digits=12, decimal_places=2)
    """The price of the booking, fixed when it is made."""

    status = fields.CharEnumField(BookingStatus, default=BookingStatus.BOOKED)

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "car_id": self.car_id,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "total_price": self.total_price,
            "status": self.status,
        }

    def __str__(self):
        return f"[{self.id}] car {self.car_id} for user {self.user_id} ({self.status.value})"
