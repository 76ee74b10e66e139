"""
Authentication Utility - JWT handling for the /auth router group.

Provides:
- JWT token creation/verification
- FastAPI dependency that gates protected routes

Issuing tokens to end users (signup/login) is handled outside this API;
create_access_token exists for operator scripts and tests.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from cohort_api.core.config import get_settings

logger = logging.getLogger(__name__)

# Bearer token extractor; auto_error off so a missing header is a 401, not a 403
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token."""
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """
    FastAPI dependency - validate the bearer token and return its payload.

    Usage:
        router = APIRouter(dependencies=[Depends(get_current_user)])
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        logger.warning("Rejected request without bearer token")
        raise credentials_exception

    payload = decode_token(credentials.credentials)
    if not payload:
        logger.warning("Rejected request with invalid token")
        raise credentials_exception

    if not payload.get("sub"):
        raise credentials_exception

    return payload
