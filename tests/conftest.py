import os
from datetime import date
from decimal import Decimal
from itertools import count
from random import choice

import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient
from faker import Faker
from nacl import pwhash
from tortoise import Tortoise

from carrental.app import register_services
from carrental.middleware import error_middleware
from carrental.models import Car, User, Booking, UserRole
from carrental.service import AuthService, BookingService, CarService, PasswordHasher
from carrental.signals import register_signals
from carrental.store import BookingStore, CarStore, UserStore
from carrental.views import register_views

fake = Faker()

CARS = [("Toyota", "Corolla"), ("Ford", "Focus"), ("Honda", "Civic"), ("Volkswagen", "Golf"), ("Tesla", "Model 3")]

PASSWORD = "hunter22"
"""The password of every random user."""


@pytest.fixture(scope="session")
def database_url():
    return os.getenv("DATABASE_URL", "sqlite://:memory:")


@pytest.fixture
async def database(database_url):
    await Tortoise.init(
        db_url=database_url,
        modules={'models': ['carrental.models']},
    )
    await Tortoise.generate_schemas(safe=True)
    yield
    await Tortoise.close_connections()


@pytest.fixture(scope="session")
def hasher():
    """A password hasher using the cheapest settings libsodium allows."""
    return PasswordHasher(opslimit=pwhash.argon2id.OPSLIMIT_MIN, memlimit=pwhash.argon2id.MEMLIMIT_MIN)


@pytest.fixture
def car_store(database):
    return CarStore()


@pytest.fixture
def user_store(database):
    return UserStore()


@pytest.fixture
def booking_store(database):
    return BookingStore()


@pytest.fixture
def auth_service(user_store, hasher):
    return AuthService(user_store, hasher)


@pytest.fixture
def car_service(car_store):
    return CarService(car_store)


@pytest.fixture
def booking_service(booking_store, user_store, car_store):
    return BookingService(booking_store, user_store, car_store)


@pytest.fixture
def random_user_factory(database, hasher):
    user_id = count(1)

    async def create_user(is_admin=False):
        return await User.create(
            name=fake.name(), email=f"{next(user_id)}.{fake.email()}", password=await hasher.hash(PASSWORD),
            role=UserRole.ADMIN if is_admin else UserRole.CUSTOMER
        )

    return create_user


@pytest.fixture
def random_car_factory(database):
    async def create_car(price_per_day=Decimal("50.00"), available=True):
        make, model = choice(CARS)
        return await Car.create(make=make, model=model, price_per_day=price_per_day, available=available)

    return create_car


@pytest.fixture
async def random_user(random_user_factory) -> User:
    """Creates a random user in the database."""
    return await random_user_factory()


@pytest.fixture
async def random_admin(random_user_factory) -> User:
    return await random_user_factory(True)


@pytest.fixture
async def random_car(random_car_factory) -> Car:
    """Creates a random, available car in the database."""
    return await random_car_factory()


@pytest.fixture
async def random_booking(booking_service, random_user, random_car) -> Booking:
    """Books the random car for the random user for three days."""
    return await booking_service.book_car(
        random_user.id, random_car.id, date(2024, 1, 1), date(2024, 1, 4)
    )


@pytest.fixture
async def client(aiohttp_client, database, hasher) -> TestClient:
    app = web.Application(middlewares=[error_middleware])

    register_services(app, hasher)
    register_signals(app, init_database=False)  # we get the database from a fixture
    register_views(app, "/api/v1")

    return await aiohttp_client(app)
