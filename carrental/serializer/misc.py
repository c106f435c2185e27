from marshmallow import Schema, validates_schema, ValidationError
from marshmallow.fields import String, Date, Integer, Boolean

from .models import CarSchema


class RegisterSchema(Schema):
    """
    The schema of the registration request.

    Blank and missing values are checked by the auth service,
    so that the messages are the same whatever the interface.
    """
    name = String(allow_none=True)
    email = String(allow_none=True)
    password = String(allow_none=True)
    role = String(allow_none=True)


class LoginSchema(Schema):
    email = String(allow_none=True)
    password = String(allow_none=True)


class DateRangeSchema(Schema):
    start_date = Date(required=True)
    end_date = Date(required=True)

    @validates_schema
    def assert_end_after_start(self, data, **kwargs):
        """Asserts that the booking does not end before it starts."""
        if data["end_date"] < data["start_date"]:
            raise ValidationError("The end date must not be before the start date.", "end_date")


class BookingRequestSchema(DateRangeSchema):
    """The schema of the booking request."""
    user_id = Integer(required=True)
    car_id = Integer(required=True)


class CarUpdateSchema(CarSchema):
    """
    The schema of a car replacement. Unlike a new car, the availability
    must be given, so a booked car is only freed when asked for.
    """
    available = Boolean(required=True)
