"""
Password hashing helpers.
"""

from typing import Optional
from passlib.context import CryptContext
from backend.app.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.password_hash_rounds,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Check a password against a stored hash.
    
    With no stored hash (unknown account) a dummy verification still runs,
    so both failure paths cost one bcrypt round trip.
    """
    if hashed_password is None:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)
