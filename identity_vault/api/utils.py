"""
JWT utilities for issuing and verifying access tokens, and the FastAPI
dependency that guards protected routes.

Functions
---------
create_access_token(data: dict) -> str
    Creates a signed JWT access token with an expiration (`exp`) claim.
decode_access_token(token: str) -> dict
    Verifies signature & expiration and returns the claims; raises `JWTError`.
verify_token(token: str) -> dict | None
    Same as `decode_access_token` but returns None instead of raising.
require_user(request, credentials) -> dict
    Dependency: 401 without a bearer token, 403 for an invalid or expired one,
    the decoded claims otherwise (also stored on `request.state.user`).

Environment contract (from `settings`)
--------------------------------------
JWT_SECRET : str
    HMAC signing key for JWTs.
ALGORITHM : str
    JWT signing algorithm (e.g., "HS256").
ACCESS_TOKEN_EXPIRE_MINUTES : int
    Token lifetime window in minutes.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from identity_vault.database.config.config import Settings, get_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="JWT obtained from POST /login")
"""Reads `Authorization: Bearer <token>`; also documents the scheme in OpenAPI."""


def create_access_token(
    data: dict,
    secret: Optional[str] = None,
    expires_minutes: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> str:
    """
    Create a signed JWT access token.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"id": 1, "email": "a@x.com"}``).
    secret : str, optional
        Signing key; defaults to `settings.JWT_SECRET`.
    expires_minutes : int, optional
        Lifetime; defaults to `settings.ACCESS_TOKEN_EXPIRE_MINUTES`.
    settings : Settings, optional
        Source of the defaults; the process-wide `get_settings()` when omitted.

    Returns
    -------
    str
        Encoded JWT string.
    """
    settings = settings or get_settings()
    if expires_minutes is None:
        expires_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    encoding = data.copy()
    expires = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    # exp is a NumericDate (seconds since epoch)
    encoding.update({"exp": int(expires.timestamp())})
    return jwt.encode(encoding, secret or settings.JWT_SECRET, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, secret: Optional[str] = None, settings: Optional[Settings] = None) -> dict:
    """
    Verify a JWT and return its claims.

    Raises
    ------
    jose.JWTError
        Invalid signature, malformed token, or expired (`ExpiredSignatureError`).
    """
    settings = settings or get_settings()
    return jwt.decode(token, secret or settings.JWT_SECRET, algorithms=[settings.ALGORITHM])


def verify_token(token: str, settings: Optional[Settings] = None) -> Optional[dict]:
    """
    Verify a JWT and return its claims, or None when it is not acceptable.
    """
    try:
        return decode_access_token(token, settings=settings)
    except JWTError as e:
        logger.info("Rejected access token: %s", e)
        return None


def require_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """Gate a route behind a valid bearer token, checked against the app's settings."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Access token is missing")
    claims = verify_token(credentials.credentials, settings=request.app.state.settings)
    if claims is None:
        raise HTTPException(status_code=403, detail="Invalid or expired token")
    request.state.user = claims
    return claims
