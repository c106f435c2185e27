"""
Auth
----

Handles registration and login.

Inputs are trimmed and normalised before they are validated: emails are
compared and stored lower-cased, roles are upper-cased. A failed login never
tells the caller whether it was the email or the password that was wrong.
"""
from dataclasses import dataclass
from typing import Optional

from tortoise.exceptions import IntegrityError

from carrental import logger
from carrental.models import User, UserRole
from carrental.service.errors import InvalidInputError, ConflictError, UnauthorizedError
from carrental.service.passwords import PasswordHasher
from carrental.store import UserStore

MIN_PASSWORD_LENGTH = 6

DUPLICATE_EMAIL_MESSAGE = "An account with this email already exists."
BAD_CREDENTIALS_MESSAGE = "Invalid email or password."


@dataclass
class AuthResponse:
    """The outcome of a successful registration or login."""

    id: int
    name: str
    email: str
    role: UserRole
    message: str

    @classmethod
    def for_user(cls, user: User, message: str) -> "AuthResponse":
        return cls(id=user.id, name=user.name, email=user.email, role=user.role, message=message)

    def serialize(self):
        return {
            "user": {"id": self.id, "name": self.name, "email": self.email, "role": self.role},
            "message": self.message,
        }


def required(value: Optional[str], field_name: str) -> str:
    """
    Trims the value, making sure something is left.

    :raises InvalidInputError: If the value is missing or blank.
    """
    if value is None or not value.strip():
        raise InvalidInputError(f"{field_name} is required.")
    return value.strip()


def normalize_email(email: Optional[str]) -> str:
    return required(email, "Email").lower()


def normalize_role(role: Optional[str]) -> UserRole:
    """
    :raises InvalidInputError: If the role is missing or not one of the known roles.
    """
    normalized = required(role, "Role").upper()
    try:
        return UserRole(normalized)
    except ValueError:
        raise InvalidInputError("Role must be CUSTOMER or ADMIN.")


class AuthService:
    """
    Registers and authenticates users.
    """

    def __init__(self, user_store: UserStore, hasher: PasswordHasher):
        self.user_store = user_store
        self.hasher = hasher
        self._unknown_user_hash = None

    async def register(self, name: Optional[str], email: Optional[str],
                       password: Optional[str], role: Optional[str]) -> AuthResponse:
        """
        Registers a new user.

        :raises InvalidInputError: If a field is blank, the role is unknown, or the password is too short.
        :raises ConflictError: If the email is already registered.
        """
        name = required(name, "Name")
        email = normalize_email(email)
        password = required(password, "Password")
        role = normalize_role(role)

        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidInputError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")

        if await self.user_store.get_user_by_email(email) is not None:
            logger.info("Rejected registration for existing email %s", email)
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        try:
            user = await self.user_store.create_user(name, email, await self.hasher.hash(password), role)
        except IntegrityError:
            # the email was taken between the check and the insert
            logger.info("Rejected registration for existing email %s", email)
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        logger.info("Registered %s as %s", user, role.value)
        return AuthResponse.for_user(user, "Registration successful.")

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResponse:
        """
        Checks a user's credentials.

        :raises InvalidInputError: If either field is blank.
        :raises UnauthorizedError: If the user doesn't exist or the password doesn't match.
        """
        email = normalize_email(email)
        password = required(password, "Password")

        user = await self.user_store.get_user_by_email(email)
        if user is None:
            # an unknown email takes as long to reject as a wrong password
            await self.hasher.verify(await self._get_unknown_user_hash(), password)
            valid = False
        else:
            valid = await self.hasher.verify(user.password, password)

        if not valid:
            logger.debug("Failed login for %s", email)
            raise UnauthorizedError(BAD_CREDENTIALS_MESSAGE)

        return AuthResponse.for_user(user, "Login successful.")

    async def _get_unknown_user_hash(self) -> str:
        """A hash to check passwords against when nobody has the given email."""
        if self._unknown_user_hash is None:
            self._unknown_user_hash = await self.hasher.hash("unknown-user")
        return self._unknown_user_hash
