"""
Bookings
--------

This module is what handles all the bookings in the system.

Responsibilities
================

- booking a car for a user over a date range
- cancelling a booking, making the car available again
- moving the dates of a booking
- listing a user's bookings

A booking takes the car out of circulation by clearing its availability
flag, and a cancellation sets it again. The car and the booking are saved
separately and no lock is held between checking the flag and clearing it,
so two simultaneous bookings of the same car may both succeed.
"""
from datetime import date
from typing import List

from carrental import logger
from carrental.models import Booking, BookingStatus, Car
from carrental.service.errors import NotFoundError, CarUnavailableError, InvalidStateError
from carrental.store import BookingStore, CarStore, UserStore


def get_price(car: Car, start_date: date, end_date: date):
    """The price of renting the car for every night between the two dates."""
    return car.price_per_day * (end_date - start_date).days


class BookingService:

    def __init__(self, booking_store: BookingStore, user_store: UserStore, car_store: CarStore):
        self.booking_store = booking_store
        self.user_store = user_store
        self.car_store = car_store

    async def get_booking(self, booking_id: int) -> Booking:
        """
        :raises NotFoundError: If there is no booking with that id.
        """
        booking = await self.booking_store.get_booking(booking_id)
        if booking is None:
            raise NotFoundError("Booking", booking_id)
        return booking

    async def book_car(self, user_id: int, car_id: int, start_date: date, end_date: date) -> Booking:
        """
        Books a car for a user.

        The duration is not validated: an end date on or before the start
        date gives a zero or negative price.

        :raises NotFoundError: If either the user or the car doesn't exist.
        :raises CarUnavailableError: If the car is already booked.
        """
        user = await self.user_store.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        car = await self.car_store.get_car(car_id)
        if car is None:
            raise NotFoundError("Car", car_id)

        if not car.available:
            logger.info("Rejected booking of unavailable car %s for user %s", car.id, user.id)
            raise CarUnavailableError(car.id)

        total_price = get_price(car, start_date, end_date)

        car.available = False
        await self.car_store.save_car(car)

        booking = await self.booking_store.create_booking(
            user, car, start_date, end_date, total_price, BookingStatus.BOOKED
        )
        logger.info("Created booking %s", booking)
        return booking

    async def cancel_booking(self, booking_id: int) -> Booking:
        """
        Cancels a booking and releases its car.

        Cancelling a booking that is already cancelled is allowed.

        :raises NotFoundError: If the booking doesn't exist.
        """
        booking = await self.get_booking(booking_id)
        booking.status = BookingStatus.CANCELLED

        car = await self.car_store.get_car(booking.car_id)
        car.available = True
        await self.car_store.save_car(car)

        await self.booking_store.save_booking(booking)
        logger.info("Cancelled booking %s", booking)
        return booking

    async def get_user_bookings(self, user_id: int) -> List[Booking]:
        return await self.booking_store.get_bookings_for_user(user_id)

    async def update_booking(self, booking_id: int, new_start_date: date, new_end_date: date) -> Booking:
        """
        Moves a booking to new dates.

        The total price is left as it was when the booking was made,
        and the car's availability is not checked again.

        :raises NotFoundError: If the booking doesn't exist.
        :raises InvalidStateError: If the booking has been cancelled.
        """
        booking = await self.get_booking(booking_id)
        if booking.is_cancelled:
            raise InvalidStateError("Cannot update a cancelled booking")

        booking.start_date = new_start_date
        booking.end_date = new_end_date
        await self.booking_store.save_booking(booking)
        logger.info("Moved booking %s to %s - %s", booking.id, new_start_date, new_end_date)
        return booking
