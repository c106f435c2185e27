"""
User Related Views
-------------------------
"""
from carrental.models import User
from carrental.serializer import JSendSchema, JSendStatus, Many
from carrental.serializer.decorators import returns
from carrental.serializer.models import BookingSchema
from carrental.views.base import BaseView
from carrental.views.decorators import match_getter


class UserBookingsView(BaseView):
    """
    Gets the bookings made by a single user.
    """
    url = "/users/{id}/bookings"
    name = "user_bookings"
    with_user = match_getter("user_store.get_user", "user", user_id="id")

    @with_user
    @returns(JSendSchema.of(bookings=Many(BookingSchema())))
    async def get(self, user: User):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bookings": [
                booking.serialize() for booking in await self.booking_service.get_user_bookings(user.id)
            ]}
        }
