"""
The entry point for the CLI tool
"""

from aiohttp import web

from carrental.app import build_app
from carrental.config import port


def run():
    """Builds and runs the app."""
    web.run_app(build_app(), port=port)


if __name__ == '__main__':
    run()
