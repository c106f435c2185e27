"""
Bookings
--------
"""
from datetime import date
from decimal import Decimal
from typing import Optional, List, Union

from carrental.models import Booking, BookingStatus, Car, User


class BookingStore:
    """Persists the bookings made against the fleet."""

    async def get_booking(self, booking_id: int) -> Optional[Booking]:
        return await Booking.filter(id=booking_id).first()

    async def get_bookings_for_user(self, user: Union[User, int]) -> List[Booking]:
        """
        Gets the bookings made by a given user.

        :param user: The user or id to fetch.
        :return: The bookings, ordered by id.
        """
        if isinstance(user, User):
            uid = user.id
        elif isinstance(user, int):
            uid = user
        else:
            raise TypeError("Must be user id or user.")

        return await Booking.filter(user_id=uid).order_by("id")

    async def create_booking(self, user: User, car: Car, start_date: date, end_date: date,
                             total_price: Union[Decimal, float],
                             status: BookingStatus = BookingStatus.BOOKED) -> Booking:
        return await Booking.create(
            user=user, car=car,
            start_date=start_date, end_date=end_date,
            total_price=total_price, status=status
        )

    async def save_booking(self, booking: Booking) -> Booking:
        await booking.save()
        return booking
