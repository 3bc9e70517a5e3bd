from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError
from starlette.concurrency import run_in_threadpool

from app.core.config import (
    PASSWORD_HASH_MEMORY_COST,
    PASSWORD_HASH_PARALLELISM,
    PASSWORD_HASH_TIME_COST,
)

# Salted argon2 at a fixed work factor. Slow on purpose.
ph = PasswordHasher(
    time_cost=PASSWORD_HASH_TIME_COST,
    memory_cost=PASSWORD_HASH_MEMORY_COST,
    parallelism=PASSWORD_HASH_PARALLELISM,
)


def verify_password(plain_password, hashed_password):
    try:
        ph.verify(hashed_password, plain_password)
        return True
    except VerifyMismatchError:
        return False


def get_password_hash(password):
    return ph.hash(password)


async def hash_password_async(password: str) -> str:
    """Hashes on the thread pool so the event loop keeps serving requests."""
    return await run_in_threadpool(get_password_hash, password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    return await run_in_threadpool(verify_password, plain_password, hashed_password)
