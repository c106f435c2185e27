"""
Cars
----

Handles the CRUD for the cars in the fleet.
"""
from decimal import Decimal
from typing import List, Union

from carrental import logger
from carrental.models import Car
from carrental.service.errors import NotFoundError
from carrental.store import CarStore


class CarService:

    def __init__(self, car_store: CarStore):
        self.car_store = car_store

    async def get_available_cars(self) -> List[Car]:
        """Gets the cars that can currently be booked."""
        return await self.car_store.get_available_cars()

    async def get_car(self, car_id: int) -> Car:
        """
        :raises NotFoundError: If there is no car with that id.
        """
        car = await self.car_store.get_car(car_id)
        if car is None:
            raise NotFoundError("Car", car_id)
        return car

    async def add_car(self, make: str, model: str, price_per_day: Union[Decimal, float],
                      available: bool = True) -> Car:
        """Adds a car to the fleet, returning it with its new id."""
        car = await self.car_store.create_car(make, model, price_per_day, available)
        logger.info("Added car %s", car)
        return car

    async def update_car(self, car_id: int, make: str, model: str,
                         price_per_day: Union[Decimal, float], available: bool) -> Car:
        """
        Replaces the details of a car.

        :raises NotFoundError: If there is no car with that id.
        """
        car = await self.get_car(car_id)
        car.make = make
        car.model = model
        car.available = available
        car.price_per_day = price_per_day
        await self.car_store.save_car(car)
        logger.info("Updated car %s", car)
        return car

    async def delete_car(self, car_id: int) -> Car:
        """
        Removes a car from the fleet.

        :return: The car as it was before it was deleted.
        :raises NotFoundError: If there is no car with that id.
        """
        car = await self.get_car(car_id)
        await self.car_store.delete_car(car)
        logger.info("Deleted car %s", car)
        return car
