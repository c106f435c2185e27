"""
Decorators
----------

Decorators that take care of the JSON going in and out of the routes.
A route wrapped with :func:`expects` finds its validated input on
``self.request["data"]``, and a route wrapped with :func:`returns` can
return plain dictionaries.
"""

from functools import wraps
from http import HTTPStatus
from json import JSONDecodeError
from typing import Dict, Optional, Tuple, Union

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError
from marshmallow_jsonschema import JSONSchema

from carrental import logger
from carrental.serializer.jsend import JSendSchema, JSendStatus


def _fail(message: str, **data) -> web.Response:
    """A JSend failure with a 400 status."""
    response_data = JSendSchema().dump({
        "status": JSendStatus.FAIL,
        "data": {"message": message, **data}
    })
    return web.json_response(response_data, status=HTTPStatus.BAD_REQUEST)


def expects(schema: Optional[Schema]):
    """
    Validates the JSON body of the request against the given schema,
    storing the result on the request under ``"data"``.

    Missing, malformed and invalid bodies are answered with a JSend
    failure that includes the JSON schema the route expects.

    .. code:: python

        @expects(CarSchema())
        async def post(self):
            car_data = self.request["data"]

    ``@expects(None)`` marks a route that takes no body and does nothing.
    """

    if schema is None:
        return lambda x: x

    if not isinstance(schema, Schema):
        raise TypeError(f"Expected a Schema, got {type(schema)}")

    json_schema = JSONSchema().dump(schema)["definitions"][type(schema).__name__]

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            request = self.request

            if not request.body_exists or request.content_type != "application/json":
                return _fail(
                    f"This route ({request.method}: {request.rel_url}) only accepts JSON.",
                    schema=json_schema
                )

            try:
                request["data"] = schema.load(await request.json())
            except JSONDecodeError as err:
                return _fail("Could not parse supplied JSON.", errors=err.args)
            except ValidationError as err:
                return _fail("The request did not validate properly.", errors=err.messages, schema=json_schema)

            return await original_function(self, **kwargs)

        return new_func

    return decorator


def returns(
    schema: Optional[Schema] = None, return_code: HTTPStatus = HTTPStatus.OK,
    **named_schema: Union[Schema, Tuple[Schema, HTTPStatus]]
):
    """
    Dumps whatever the route returns through a schema.

    With a single schema the route returns its data. With named schemas
    the route returns a ``(name, data)`` pair, and each name picks its
    own schema and status code:

    .. code:: python

        @returns(
            missing=(JSendSchema(), HTTPStatus.NOT_FOUND),
            found=JSendSchema.of(car=CarSchema())
        )
        async def get(self):
            ...
            return "found", {"status": JSendStatus.SUCCESS, "data": {"car": car.serialize()}}

    Data that doesn't fit its schema, or an unknown name,
    becomes a JSend error with a 500 status.
    """

    schemas: Dict[Optional[str], Tuple[Schema, HTTPStatus]] = {
        name: value if isinstance(value, tuple) else (value, return_code)
        for name, value in named_schema.items()
    }
    if schema is not None:
        schemas[None] = (schema, return_code)

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            if schema is not None:
                schema_name, response_data = None, await original_function(self, **kwargs)
            else:
                schema_name, response_data = await original_function(self, **kwargs)

            try:
                matched_schema, status = schemas[schema_name]
                return web.json_response(matched_schema.dump(response_data), status=status)
            except (ValidationError, KeyError) as err:
                logger.error("Could not serialize response from %s: %s", original_function.__qualname__, err)
                response_data = JSendSchema().dump({
                    "status": JSendStatus.ERROR,
                    "data": {"errors": err.messages if isinstance(err, ValidationError) else err.args},
                    "message": "We tried to send you data back, but it came out wrong.",
                })
                return web.json_response(response_data, status=HTTPStatus.INTERNAL_SERVER_ERROR)

        return new_func

    return decorator
