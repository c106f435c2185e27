"""
Car
-------------------------

Represents a car in the fleet. A car may only be booked while
it is flagged as available; the flag is cleared by a booking and
restored when that booking is cancelled.
"""
from typing import Dict, Any

from tortoise import Model, fields


class Car(Model):
    id = fields.IntField(primary_key=True)
    make = fields.CharField(max_length=255)
    model = fields.CharField(max_length=255)

    price_per_day = fields.DecimalField(max_digits=10, decimal_places=2)
    """The daily rental rate."""

    available = fields.BooleanField(default=True)

    def serialize(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "make": self.make,
            "model": self.model,
            "price_per_day": self.price_per_day,
            "available": self.available,
        }

    def __str__(self):
        return f"[{self.id}] {self.make} {self.model}"
