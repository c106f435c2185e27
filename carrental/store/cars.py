"""
Cars
-----
"""
from decimal import Decimal
from typing import Optional, List, Union

from carrental.models import Car


class CarStore:
    """Persists the cars in the fleet."""

    async def get_available_cars(self) -> List[Car]:
        """Gets the cars whose availability flag is set, ordered by id."""
        return await Car.filter(available=True).order_by("id")

    async def get_car(self, car_id: int) -> Optional[Car]:
        return await Car.filter(id=car_id).first()

    async def create_car(self, make: str, model: str, price_per_day: Union[Decimal, float],
                         available: bool = True) -> Car:
        return await Car.create(make=make, model=model, price_per_day=price_per_day, available=available)

    async def save_car(self, car: Car) -> Car:
        await car.save()
        return car

    async def delete_car(self, car: Car):
        await car.delete()
