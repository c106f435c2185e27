"""
Passwords
---------

One-way password hashing, using the argon2id implementation in libsodium.

Hashing is slow on purpose, so it is done on a thread pool
and the event loop is free to serve other requests meanwhile.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from nacl import pwhash
from nacl.exceptions import InvalidkeyError


def _hash(password: str, opslimit: int, memlimit: int) -> str:
    return pwhash.argon2id.str(password.encode("utf-8"), opslimit=opslimit, memlimit=memlimit).decode("ascii")


def _verify(password_hash: str, password: str) -> bool:
    try:
        return pwhash.verify(password_hash.encode("ascii"), password.encode("utf-8"))
    except InvalidkeyError:
        return False


class PasswordHasher:
    """
    Hashes and verifies passwords.

    The cost parameters default to the interactive limits recommended by
    libsodium. Lower them only where speed matters more than strength (tests).
    """

    def __init__(self, opslimit: int = pwhash.argon2id.OPSLIMIT_INTERACTIVE,
                 memlimit: int = pwhash.argon2id.MEMLIMIT_INTERACTIVE):
        self.opslimit = opslimit
        self.memlimit = memlimit
        self._executor = ThreadPoolExecutor(thread_name_prefix="password-hasher")

    async def _run_in_executor(self, func, *args, **kwargs):
        pfunc = partial(func, *args, **kwargs)
        return await asyncio.get_running_loop().run_in_executor(
            self._executor,
            pfunc
        )

    async def hash(self, password: str) -> str:
        return await self._run_in_executor(_hash, password, self.opslimit, self.memlimit)

    async def verify(self, password_hash: str, password: str) -> bool:
        """Checks the password against the stored hash."""
        return await self._run_in_executor(_verify, password_hash, password)
