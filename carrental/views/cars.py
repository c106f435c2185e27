"""
Car Related Views
-------------------------

Handles all the car CRUD.
"""
from http import HTTPStatus

from carrental.models import Car
from carrental.serializer import JSendStatus, JSendSchema, Many
from carrental.serializer.decorators import returns, expects
from carrental.serializer.misc import CarUpdateSchema
from carrental.serializer.models import CarSchema
from carrental.service import NotFoundError
from carrental.views.base import BaseView
from carrental.views.decorators import match_getter

CAR_FIELDS = ("make", "model", "price_per_day", "available")


class CarsView(BaseView):
    """
    Gets the available cars, or adds a new car.
    """
    url = "/cars"
    name = "cars"

    @expects(None)
    @returns(JSendSchema.of(cars=Many(CarSchema())))
    async def get(self):
        """Gets the cars that can currently be booked."""
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"cars": [car.serialize() for car in await self.car_service.get_available_cars()]}
        }

    @expects(CarSchema(only=CAR_FIELDS))
    @returns(JSendSchema.of(car=CarSchema()), HTTPStatus.CREATED)
    async def post(self):
        """Adds a car to the fleet."""
        car = await self.car_service.add_car(**self.request["data"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"car": car.serialize()}
        }


class CarView(BaseView):
    """
    Gets, replaces or deletes a single car.
    """
    url = "/cars/{id}"
    name = "car"
    with_car = match_getter("car_store.get_car", "car", car_id="id")

    @with_car
    @returns(JSendSchema.of(car=CarSchema()))
    async def get(self, car: Car):
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"car": car.serialize()}
        }

    @with_car
    @expects(CarUpdateSchema(only=CAR_FIELDS))
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        updated=JSendSchema.of(car=CarSchema())
    )
    async def put(self, car: Car):
        """Replaces the make, model, price and availability of the car."""
        try:
            car = await self.car_service.update_car(car.id, **self.request["data"])
        except NotFoundError as error:
            return "missing", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        else:
            return "updated", {
                "status": JSendStatus.SUCCESS,
                "data": {"car": car.serialize()}
            }

    @with_car
    @returns(
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
        deleted=JSendSchema.of(car=CarSchema())
    )
    async def delete(self, car: Car):
        """Deletes a car, returning it as it was."""
        try:
            car = await self.car_service.delete_car(car.id)
        except NotFoundError as error:
            return "missing", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        else:
            return "deleted", {
                "status": JSendStatus.SUCCESS,
                "data": {"car": car.serialize()}
            }
