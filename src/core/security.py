# src/core/security.py

"""
Handles security-related functions for the application.

This module provides password hashing and verification, and the token service:
issuing signed, time-bounded JSON Web Tokens (JWT) for a user id and verifying
them. Tokens are stateless; the signature and the expiry claim are the only
source of trust, so there is no revocation list and no refresh mechanism.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi.security import HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from src.core.config import settings
from src.core.exceptions import ExpiredToken, InvalidToken
from src.schemas.token import TokenData

logger = logging.getLogger(__name__)

# 1. Password Hashing
# bcrypt generates a fresh random salt for every hash.
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS
)

# Reads "Authorization: Bearer <token>"; the gate in src.api.auth decides how to reject.
bearer_scheme = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verifies a plain text password against a hashed password.

    Args:
        plain_password: The plain text password to verify.
        hashed_password: The hashed password from the database.

    Returns:
        True if the password is a match, False otherwise.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hashes a plain text password using bcrypt.

    Args:
        password: The plain text password to hash.

    Returns:
        The salted hash as a string.
    """
    return pwd_context.hash(password)


# 2. JWT Handling
def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """
    Creates a JWT access token for a user.

    The token carries the user id as its subject, the issue time and an
    expiration timestamp.

    Args:
        user_id: The id of the user the token identifies.
        expires_delta: An optional lifetime for the token. If not provided,
                       ACCESS_TOKEN_EXPIRE_MINUTES from the settings is used.

    Returns:
        The encoded JWT as a string.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    issued_at = datetime.now(timezone.utc)
    to_encode = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """
    Verifies a JWT and extracts the user id it was issued for.

    Args:
        token: The encoded JWT presented by the client.

    Returns:
        A TokenData instance holding the user id from the `sub` claim.

    Raises:
        ExpiredToken: If the token's expiry has passed.
        InvalidToken: If the signature does not verify, the token is malformed,
                      an exp or iat claim is missing,
                      or the subject is missing or not a user id.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require_exp": True, "require_iat": True},
        )
    except ExpiredSignatureError:
        raise ExpiredToken()
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        raise InvalidToken()

    subject = payload.get("sub")
    if subject is None:
        raise InvalidToken()
    try:
        return TokenData(user_id=int(subject))
    except ValueError:
        raise InvalidToken()
