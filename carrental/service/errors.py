"""
Errors
------

The errors raised by the service layer. Every error carries a
message that is safe to show to the person making the request.
"""


class ServiceError(Exception):
    """The base class for all the expected failures of a use case."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidInputError(ServiceError):
    """Raised when a field is missing or malformed."""


class ConflictError(ServiceError):
    """Raised when the request clashes with an existing record."""


class UnauthorizedError(ServiceError):
    """Raised when the supplied credentials are not valid."""


class NotFoundError(ServiceError):
    """Raised when a record with the given id does not exist."""

    def __init__(self, kind: str, identifier):
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.identifier = identifier


class CarUnavailableError(ServiceError):
    """Raised when trying to book a car that is already booked."""

    def __init__(self, car_id):
        super().__init__("Car is not available")
        self.car_id = car_id


class InvalidStateError(ServiceError):
    """Raised when a booking is not in a state that allows the operation."""
