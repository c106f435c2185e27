"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema
from marshmallow.fields import Integer, Boolean, String, Email, Date, Float

from carrental.models import UserRole, BookingStatus
from .fields import EnumField


class CarSchema(Schema):
    """The schema corresponding to the :class:`~carrental.models.car.Car` model."""

    id = Integer()
    make = String(required=True)
    model = String(required=True)
    price_per_day = Float(required=True)
    available = Boolean(load_default=True)


class UserSchema(Schema):
    """The schema corresponding to the :class:`~carrental.models.user.User` model."""

    id = Integer()
    name = String(required=True)
    email = Email(required=True)
    role = EnumField(UserRole, required=True)


class BookingSchema(Schema):
    id = Integer()
    user_id = Integer(required=True)
    car_id = Integer(required=True)
    start_date = Date(required=True)
    end_date = Date(required=True)
    total_price = Float()
    status = EnumField(BookingStatus)
