"""
App
-----

Composes the stores and services into an application.
Everything is built once, here, and handed to the views
through the app.
"""

from aiohttp import web

from carrental import server_mode, logger
from carrental.config import api_root, database_url
from carrental.middleware import error_middleware
from carrental.service import AuthService, BookingService, CarService, PasswordHasher
from carrental.signals import register_signals
from carrental.store import BookingStore, CarStore, UserStore
from carrental.version import __version__, name
from carrental.views import register_views


def register_services(app: web.Application, hasher: PasswordHasher = None):
    """Builds the stores and the services that use them, and stores them on the app."""
    app['car_store'] = CarStore()
    app['user_store'] = UserStore()
    app['booking_store'] = BookingStore()

    app['auth_service'] = AuthService(app['user_store'], hasher if hasher is not None else PasswordHasher())
    app['car_service'] = CarService(app['car_store'])
    app['booking_service'] = BookingService(app['booking_store'], app['user_store'], app['car_store'])


def build_app(db_uri=None):
    """Sets up the app."""
    logger.info("Building %s %s in %s mode", name, __version__, server_mode)
    app = web.Application(middlewares=[error_middleware])
    app['database_uri'] = db_uri if db_uri is not None else database_url

    register_services(app)

    # set up the database connection
    register_signals(app)

    # register views
    register_views(app, api_root)

    return app
