"""
JSend Schema
------------

Every response of the API is wrapped in a `JSend`_ envelope.

.. _`JSend`: https://github.com/omniti-labs/jsend
"""

from enum import Enum

from marshmallow import Schema, fields, validates_schema, ValidationError
from marshmallow.fields import Field

from .fields import EnumField


class JSendStatus(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    """The caller did something wrong."""
    ERROR = "error"
    """The server did something wrong."""


class JSendSchema(Schema):
    """
    A ``success`` or ``fail`` response carries ``data``, and a failure
    must explain itself with ``data.message``. An ``error`` carries a
    top level ``message`` instead.
    """
    status = EnumField(JSendStatus, required=True)
    data = fields.Dict()
    message = fields.String()

    @validates_schema
    def assert_fields(self, data, **kwargs):
        status = data["status"]
        if status is JSendStatus.ERROR:
            if "message" not in data:
                raise ValidationError("An error must have a message.")
            return

        if "data" not in data:
            raise ValidationError(f"A {status.value} response must have data.")
        if status is JSendStatus.FAIL and "message" not in data["data"]:
            raise ValidationError("A failure must have a message in its data.")

    @staticmethod
    def of(**kwargs):
        """
        Makes a JSendSchema whose ``data`` holds the given fields, for example
        ``JSendSchema.of(car=CarSchema())``. Schemas are nested, fields are used as they are.
        """
        DataSchema = type('DataSchema', (Schema,), {
            field_name: schema if isinstance(schema, Field) else fields.Nested(schema)
            for field_name, schema in kwargs.items()
        })

        class TypedJSendSchema(JSendSchema):
            data = fields.Nested(DataSchema)

        return TypedJSendSchema()
