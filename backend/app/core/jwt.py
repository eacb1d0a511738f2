"""
JWT token utilities for authentication.

This module provides functions for encoding and decoding session tokens.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from backend.app.core.config import settings


def create_access_token(
    subject: str,
    claims: Optional[Dict[str, Any]] = None,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed session token.
    
    Args:
        subject: Token subject (the user id)
        claims: Extra claims to embed (e.g. role)
        expires_delta: Optional custom expiration time
        
    Returns:
        Encoded JWT token string
        
    Example payload:
        {
            "sub": "2f1c...-uuid",
            "role": "customer",
            "exp": 1234567890
        }
    """
    to_encode = dict(claims or {})
    
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta
    
    to_encode.update({"sub": subject, "exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and validate a session token.
    
    Args:
        token: JWT token string to decode
        
    Returns:
        Decoded token payload if valid (includes: sub, role, exp), None otherwise
    """
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
