"""
Survey API Backend: Password Hashing
=======================================

What:  bcrypt hashing and verification through passlib's CryptContext.
Why:   One hashing policy for every user-creation route; login only ever
       compares against a hash.
"""

import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)


def create_password_context(rounds: int = 10) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def get_password_hash(pwd_context: CryptContext, password: str) -> str:
    return pwd_context.hash(password)


def verify_password(pwd_context: CryptContext, plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    A stored value passlib cannot identify as a hash (for example a legacy
    plaintext record) never verifies.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored credential is not a recognised hash; rejecting login")
        return False
