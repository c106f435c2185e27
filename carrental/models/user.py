"""
User
---------------------------
"""
from enum import Enum

from tortoise import Model, fields


class UserRole(str, Enum):
    """We subclass string to make json serialization work."""
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


class User(Model):
    """
    Represents a User in the system.

    The email is stored lower-cased, and the password
    only ever as a one-way hash.
    """

    id = fields.IntField(primary_key=True)
    name = fields.CharField(max_length=255)
    email = fields.CharField(max_length=255, unique=True)
    password = fields.CharField(max_length=255)
    role = fields.CharEnumField(UserRole, default=UserRole.CUSTOMER)

    def serialize(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }

    def __str__(self):
        return f"[{self.id}] {self.name} ({self.email})"
