"""Security utilities for verifying bearer tokens issued by the identity service."""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt

from app.config import settings


def create_access_token(
    data: Dict[str, Any], expires_delta: Optional[timedelta] = None
) -> str:
    """Create a JWT access token.

    Tokens are normally issued by the external auth service; this helper signs
    tokens with the shared secret for tooling and tests.

    Args:
        data: Dictionary containing token claims (e.g., {'sub': '42'})
        expires_delta: Custom expiration time. If None, uses the configured default

    Returns:
        Encoded JWT token

    Raises:
        ValueError: If SECRET_KEY is not configured
    """
    if not settings.SECRET_KEY:
        raise ValueError("SECRET_KEY environment variable is not set")

    to_encode = data.copy()

    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM
    )
    return encoded_jwt


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and verify a JWT token.

    Args:
        token: JWT token string

    Returns:
        Token payload dictionary

    Raises:
        HTTPException: If token is invalid or expired
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def get_token_subject(token: str) -> Optional[str]:
    """Extract subject (user id) from token, or None if the token is invalid."""
    try:
        payload = decode_token(token)
        return payload.get("sub")
    except HTTPException:
        return None
