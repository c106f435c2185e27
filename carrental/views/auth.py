"""
Auth Related Views
-------------------------

Handles registration and login.
"""
from http import HTTPStatus

from marshmallow.fields import String

from carrental.serializer import JSendStatus, JSendSchema
from carrental.serializer.decorators import returns, expects
from carrental.serializer.misc import RegisterSchema, LoginSchema
from carrental.serializer.models import UserSchema
from carrental.service import InvalidInputError, ConflictError, UnauthorizedError
from carrental.views.base import BaseView

AuthResponseSchema = JSendSchema.of(user=UserSchema(), message=String())


class RegisterView(BaseView):
    url = "/auth/register"
    name = "register"

    @expects(RegisterSchema())
    @returns(
        invalid=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        conflict=(JSendSchema(), HTTPStatus.CONFLICT),
        registered=(AuthResponseSchema, HTTPStatus.CREATED)
    )
    async def post(self):
        """Registers a new customer or admin."""
        data = self.request["data"]
        try:
            response = await self.auth_service.register(
                data.get("name"), data.get("email"), data.get("password"), data.get("role")
            )
        except InvalidInputError as error:
            return "invalid", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        except ConflictError as error:
            return "conflict", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        else:
            return "registered", {
                "status": JSendStatus.SUCCESS,
                "data": response.serialize()
            }


class LoginView(BaseView):
    url = "/auth/login"
    name = "login"

    @expects(LoginSchema())
    @returns(
        invalid=(JSendSchema(), HTTPStatus.BAD_REQUEST),
        unauthorized=(JSendSchema(), HTTPStatus.UNAUTHORIZED),
        logged_in=AuthResponseSchema
    )
    async def post(self):
        """Checks the credentials of a user."""
        data = self.request["data"]
        try:
            response = await self.auth_service.login(data.get("email"), data.get("password"))
        except InvalidInputError as error:
            return "invalid", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        except UnauthorizedError as error:
            return "unauthorized", {
                "status": JSendStatus.FAIL,
                "data": {"message": error.message}
            }
        else:
            return "logged_in", {
                "status": JSendStatus.SUCCESS,
                "data": response.serialize()
            }
