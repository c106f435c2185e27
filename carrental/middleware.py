"""
Middleware
----------
"""
from http import HTTPStatus

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from carrental import logger
from carrental.serializer import JSendStatus, JSendSchema

response_schema = JSendSchema()


@middleware
async def error_middleware(request: Request, handler):
    """
    Turns any unexpected exception raised by a view (such as a failing
    database) into a JSend error, without leaking its details.
    HTTP exceptions are passed through untouched.
    """
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.rel_url)
        return web.json_response(response_schema.dump({
            "status": JSendStatus.ERROR,
            "message": "Something went wrong on our end."
        }), status=HTTPStatus.INTERNAL_SERVER_ERROR)
