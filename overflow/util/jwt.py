"""Session token encoding and verification.

Tokens are issued by the authentication front end and carry the caller's
user id. This service only needs to verify them; ``create_token`` exists
for local tooling and tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel, ValidationError

from overflow.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    exp: datetime


class JWTError(Exception):
    """Session token could not be trusted."""


def create_token(
    user_id: str, settings: AuthSettings, expires_in: Optional[timedelta] = None
) -> str:
    """Sign a session token for ``user_id``.

    Tokens expire after ``settings.jwt_expiry_days`` unless ``expires_in``
    is given.
    """
    lifetime = expires_in or timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "exp": datetime.now(timezone.utc) + lifetime}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode ``token`` and check its signature, expiry and claims.

    Raises:
        JWTError: If the token is expired, tampered with, or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Invalid token payload") from e
