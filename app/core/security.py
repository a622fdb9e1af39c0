"""
Security utilities for authentication
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import argon2
import bcrypt
from argon2.exceptions import InvalidHashError, VerificationError
from jose import JWTError, jwt

from app.core.config import settings

logger = logging.getLogger(__name__)

_hasher = argon2.PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with argon2"""
    return _hasher.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Verify a password against its hash.

    argon2 hashes are checked with argon2; anything else is treated as a
    bcrypt hash.
    """
    if not hashed_password:
        return False

    if hashed_password.startswith("$argon2"):
        try:
            return _hasher.verify(hashed_password, plain_password)
        except (VerificationError, InvalidHashError):
            return False

    try:
        # bcrypt only looks at the first 72 bytes
        return bcrypt.checkpw(
            plain_password.encode("utf-8")[:72],
            hashed_password.encode("utf-8")
        )
    except ValueError:
        logger.warning("Unrecognised password hash format")
        return False


def create_access_token(data: Dict, expires_minutes: Optional[int] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()

    if expires_minutes is None:
        expires_minutes = settings.JWT_EXPIRE_MINUTES

    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM
    )


def decode_token(token: str) -> Dict:
    """Decode and verify a JWT token"""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        raise ValueError("Invalid token")
