"""Helpers shared by controllers that read the caller's access token."""

from typing import Optional

from fastapi import Header, HTTPException, status

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the credentials of an ``Authorization`` header, if any."""
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, credentials = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        value = credentials.strip()
    return value or None


async def access_token(
    authorization: Optional[str] = Header(default=None),
) -> str:
    """
    FastAPI dependency resolving the forwarded access token.

    Data routes are scoped by the backend's row-level security, so a request
    without a token is rejected before any backend call.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token
