"""
Password hashing.

bcrypt via passlib. Hashing is deliberately slow, so the async variants
run it in the thread pool and never block the event loop.
"""

import logging

from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

# bcrypt ignores everything past this many bytes
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """
    Salted one-way password hashing with a configurable bcrypt cost.

    ``verify`` delegates to bcrypt's own constant-time comparison.
    """

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password using bcrypt.

        Raises:
            ValueError: If the password is longer than bcrypt can hash
        """
        if len(plaintext.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password exceeds {BCRYPT_MAX_BYTES} bytes")
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Verify that a plaintext password matches its stored hash.

        Returns False for hashes passlib cannot identify rather than raising,
        and for passwords too long to have been hashed in full.
        """
        if len(plaintext.encode("utf-8")) > BCRYPT_MAX_BYTES:
            self._context.dummy_verify()
            return False
        try:
            return self._context.verify(plaintext, hashed)
        except (ValueError, TypeError) as e:
            logger.warning("Password verification on unusable hash: %s", e)
            return False

    async def hash_async(self, plaintext: str) -> str:
        return await run_in_threadpool(self.hash, plaintext)

    async def verify_async(self, plaintext: str, hashed: str) -> bool:
        return await run_in_threadpool(self.verify, plaintext, hashed)

    async def dummy_verify_async(self) -> None:
        """Spend the time of a real verification; used when no account matched."""
        await run_in_threadpool(self._context.dummy_verify)
