"""
.. autoclasstree:: carrental.service

The service layer for the system. Acts as the internal API.
Each interface (currently only the REST API) should use the
service layer to implement its logic.

Each service is handed the stores it needs when it is built,
so that the same use cases can be composed against any store.
"""

from .auth import AuthService, AuthResponse
from .bookings import BookingService
from .cars import CarService
from .errors import ServiceError, InvalidInputError, ConflictError, UnauthorizedError, NotFoundError, \
    CarUnavailableError, InvalidStateError
from .passwords import PasswordHasher
