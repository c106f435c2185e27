"""
.. autoclasstree:: carrental.views

This package contains the server API for browsing the fleet,
registering and logging in, and booking cars.

API Conventions
---------------

The API conforms as best as possible to the REST standard. In short, the api must:

* Be ordered in terms of resources (nouns such as car)
* Have multiple ways of accessing the same resource (GET, POST, PUT, PATCH, DELETE)
* Accept and return JSON with snake_case key naming
* Have idempotent_ GET, PUT, PATCH, and DELETE operations

API Expected Responses
----------------------

The server responds with JSend formatted JSON to all requests.

.. _idempotent: https://www.w3.org/Protocols/rfc2616/rfc2616-sec9.html#sec9.1.2
"""

import aiohttp_cors
from aiohttp.abc import Application

from carrental import logger
from .auth import RegisterView, LoginView
from .bookings import BookingsView, BookingView, BookingCancelView
from .cars import CarsView, CarView
from .users import UserBookingsView

views = [
    CarsView, CarView,
    RegisterView, LoginView,
    BookingsView, BookingView, BookingCancelView,
    UserBookingsView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
        view.enable_cors(cors)
