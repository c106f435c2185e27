from decimal import Decimal

import pytest

from carrental.models import Car
from carrental.service import NotFoundError


async def test_get_available_cars(car_service, random_car_factory):
    car = await random_car_factory()
    await random_car_factory(available=False)
    assert await car_service.get_available_cars() == [car]


async def test_add_car(car_service):
    """Assert that a new car is stored and given an id."""
    car = await car_service.add_car("Ford", "Focus", Decimal("42.00"))
    assert car.id is not None

    stored = await Car.get(id=car.id)
    assert stored.make == "Ford"
    assert stored.price_per_day == Decimal("42.00")
    assert stored.available is True


async def test_add_unavailable_car(car_service):
    car = await car_service.add_car("Ford", "Focus", 42, available=False)
    assert car not in await car_service.get_available_cars()


async def test_update_car(car_service, random_car):
    """Assert that updating a car overwrites all of its details."""
    await car_service.update_car(random_car.id, "Honda", "Jazz", Decimal("80.00"), False)

    car = await Car.get(id=random_car.id)
    assert (car.make, car.model, car.price_per_day, car.available) == ("Honda", "Jazz", Decimal("80.00"), False)


async def test_update_missing_car(car_service, database):
    with pytest.raises(NotFoundError) as error:
        await car_service.update_car(1, "Honda", "Jazz", 80, True)
    assert error.value.message == "Car not found"


async def test_delete_car(car_service, random_car):
    """Assert that deleting a car returns it as it was."""
    car = await car_service.delete_car(random_car.id)
    assert car.id == random_car.id
    assert car.make == random_car.make
    assert await Car.all().count() == 0


async def test_delete_missing_car(car_service, database):
    with pytest.raises(NotFoundError):
        await car_service.delete_car(1)


async def test_get_missing_car(car_service, database):
    with pytest.raises(NotFoundError):
        await car_service.get_car(1)
