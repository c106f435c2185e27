"""
Users
-----
"""
from typing import Optional

from carrental.models import User, UserRole


class UserStore:
    """Persists the user accounts."""

    async def get_user(self, user_id: int) -> Optional[User]:
        return await User.filter(id=user_id).first()

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Gets the user with the given email, ignoring case.

        :param email: The email to look up.
        :return: The matching user, or None.
        """
        return await User.filter(email__iexact=email).first()

    async def create_user(self, name: str, email: str, password: str, role: UserRole) -> User:
        """
        Creates a new user.

        :param password: The already hashed password.
        :raises IntegrityError: When a user with that email already exists.
        """
        return await User.create(name=name, email=email, password=password, role=role)
