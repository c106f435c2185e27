"""
Booking Related Views
---------------------------

Handles all the bookings CRUD.

The API has no way to delete a booking; it is cancelled instead, which
frees up the car for someone else.
"""
from http import HTTPStatus

from carrental.models import Booking
from carrental.serializer import JSendSchema, JSendStatus
from carrental.serializer.decorators import returns, expects
from carrental.serializer.misc import BookingRequestSchema, DateRangeSchema
from carrental.serializer.models import BookingSchema
from carrental.service import NotFoundError, CarUnavailableError, InvalidStateError
from carrental.views.base import BaseView
from carrental.views.decorators import match_getter


class BookingsView(BaseView):
    """
    Books a car.
    """
    url = "/bookings"
    name = "bookings"

    @expects(BookingRequestSchema())
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        unavailable=(JSendSchema(), HTTPStatus.CONFLICT),
        booked=(JSendSchema.of(booking=BookingSchema()), HTTPStatus.CREATED)
    )
    async def post(self):
        data = self.request["data"]
        try:
            booking = await self.booking_service.book_car(
                data["user_id"], data["car_id"], data["start_date"], data["end_date"]
            )
        except NotFoundError as error:
            return "missing", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        except CarUnavailableError as error:
            return "unavailable", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message, "car_id": error.car_id}
            }
        else:
            return "booked", {
                "status": JSendStatus.SUCCESS,
                "data": {"booking": booking.serialize()}
            }


class BookingView(BaseView):
    """
    Gets or moves a single booking.
    """
    url = "/bookings/{id}"
    name = "booking"
    with_booking = match_getter("booking_store.get_booking", "booking", booking_id="id")

    @with_booking
    @returns(JSendSchema.of(booking=BookingSchema()))
    async def get(self, booking: Booking):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"booking": booking.serialize()}
        }

    @with_booking
    @expects(DateRangeSchema())
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        cancelled=(JSendSchema(), HTTPStatus.CONFLICT),
        updated=JSendSchema.of(booking=BookingSchema())
    )
    async def patch(self, booking: Booking):
        """
        Moves the booking to new dates. The price of the
        booking stays what it was when the booking was made.
        """
        try:
            booking = await self.booking_service.update_booking(
                booking.id, self.request["data"]["start_date"], self.request["data"]["end_date"]
            )
        except NotFoundError as error:
            return "missing", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        except InvalidStateError as error:
            return "cancelled", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        else:
            return "updated", {
                "status": JSendStatus.SUCCESS,
                "data": {"booking": booking.serialize()}
            }


class BookingCancelView(BaseView):
    """
    Cancels a booking.
    """
    url = "/bookings/{id}/cancel"
    name = "booking_cancel"
    with_booking = match_getter("booking_store.get_booking", "booking", booking_id="id")

    @with_booking
    @expects(None)
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        cancelled=JSendSchema.of(booking=BookingSchema())
    )
    async def post(self, booking: Booking):
        try:
            booking = await self.booking_service.cancel_booking(booking.id)
        except NotFoundError as error:
            return "missing", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        else:
            return "cancelled", {
                "status": JSendStatus.SUCCESS,
                "data": {"booking": booking.serialize()}
            }
