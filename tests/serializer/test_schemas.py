import pytest
from marshmallow import ValidationError

from carrental.models import BookingStatus
from carrental.serializer import JSendSchema, JSendStatus
from carrental.serializer.misc import BookingRequestSchema, DateRangeSchema
from carrental.serializer.models import BookingSchema


def test_jsend_fail_requires_message():
    """Assert that a failure without a message doesn't validate."""
    with pytest.raises(ValidationError):
        JSendSchema().load({"status": "fail", "data": {}})


def test_jsend_error_requires_message():
    with pytest.raises(ValidationError):
        JSendSchema().load({"status": "error"})


def test_jsend_success():
    data = JSendSchema().load({"status": "success", "data": {"anything": 1}})
    assert data["status"] is JSendStatus.SUCCESS


def test_date_range_backwards():
    with pytest.raises(ValidationError) as error:
        DateRangeSchema().load({"start_date": "2024-01-04", "end_date": "2024-01-01"})
    assert "end_date" in error.value.messages


def test_date_range_same_day():
    data = DateRangeSchema().load({"start_date": "2024-01-01", "end_date": "2024-01-01"})
    assert data["start_date"] == data["end_date"]


def test_booking_request_requires_ids():
    with pytest.raises(ValidationError) as error:
        BookingRequestSchema().load({"start_date": "2024-01-01", "end_date": "2024-01-02"})
    assert {"user_id", "car_id"} <= set(error.value.messages)


def test_booking_status_field():
    """Assert that the status is sent as its value, and refused if unknown."""
    dumped = BookingSchema(only=("status",)).dump({"status": BookingStatus.CANCELLED})
    assert dumped == {"status": "CANCELLED"}

    with pytest.raises(ValidationError):
        BookingSchema(only=("status",)).load({"status": "LOST"})
