"""
Decorators
-------------------------
"""
from functools import wraps
from inspect import isawaitable
from operator import attrgetter
from typing import Union, Any, Dict, Tuple, Callable

from aiohttp import web
from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View

from carrental.serializer import JSendStatus, JSendSchema


def flatten(error):
    errors = []
    for sub_error in error.args:
        if isinstance(sub_error, Exception):
            errors += flatten(sub_error)
        else:
            errors.append(sub_error)
    return errors


def resolve_match_map(request: Request, match_map) -> Dict[str, Any]:
    resolved_matches = {}
    errors = []

    for key, value in match_map.items():

        if isinstance(value, str):
            value = (value, int)

        if isinstance(value, tuple):
            param = request.match_info.get(value[0])
            try:
                resolved_matches[key] = value[1](param)
            except (ValueError, TypeError):
                errors.append(ValueError(
                    f'Could not convert url parameter "{param}" to expected type {value[1].__name__}.'))
        else:
            raise TypeError(f"match_getter incorrectly configured (doesn't support {type(value)})")

    if errors:
        raise ValueError(*errors)
    return resolved_matches


def match_getter(getter_function: Union[str, Callable], *injection_parameters: str,
                 **match_map: Union[str, Tuple[str, type]]):
    """
    Automatically fetches and includes an item, or 404's if it doesn't exist.

    .. code-block:: python

        # example usage
        @match_getter("car_store.get_car", "car", car_id="id")
        async def get(self, car: Car)
            return web.json_response(data=car.serialize())

    :param getter_function: The function to fetch the item from, or the dotted
        path to it on the view (for functions that only exist once the app is built).
    :param injection_parameters: The name of the parameter to pass the object as.
    :param match_map: Associates a kwarg on the ``getter_function`` to a url variable.
    :return: A decorator that wraps the response and passes in the object.
    """

    def attach_instance(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                params = resolve_match_map(self.request, match_map)
            except (ValueError, TypeError) as error:
                response = {
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": "Errors with your request.",
                        "errors": flatten(error)
                    }
                }
                raise web.HTTPBadRequest(text=JSendSchema().dumps(response), content_type='application/json')

            getter = attrgetter(getter_function)(self) if isinstance(getter_function, str) else getter_function
            item = getter(**params)
            if isawaitable(item):
                item = await item

            if item is None:
                response = {
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": f'Could not find {", ".join(injection_parameters)} with the given params.',
                        "params": params
                    }
                }
                raise web.HTTPNotFound(text=JSendSchema().dumps(response), content_type='application/json')

            # if the getter function returns multiple items,
            # and there are multiple parameter names,
            # then set those keys in the decorated function
            if isinstance(item, tuple) and len(injection_parameters) == len(item):
                injected_kwargs = dict(zip(injection_parameters, item))
            else:
                injected_kwargs = {injection_parameters[0]: item}

            return await original_function(self, **kwargs, **injected_kwargs)

        return new_func

    return attach_instance
