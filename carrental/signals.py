"""
Signals
-------

Defines a number of signals that the aiohttp server uses
to set up and tear down its resources.

Each signal must accept an the ``app`` argument.
"""
from aiohttp.abc import Application
from tortoise import Tortoise

from carrental import logger


async def initialize_database(app: Application):
    """Initializes and generates the schema for our database."""
    logger.info("Connecting to %s", app['database_uri'])
    await Tortoise.init(
        db_url=app['database_uri'],
        modules={'models': ['carrental.models']}
    )
    await Tortoise.generate_schemas(safe=True)


async def close_database_connections(app: Application):
    """Closes the open database connections."""
    await Tortoise.close_connections()


def register_signals(app, init_database=True):
    """Registers all the signals at the appropriate hooks."""
    if init_database:
        app.on_startup.append(initialize_database)
        app.on_cleanup.append(close_database_connections)
