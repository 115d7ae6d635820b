"""
Authentication dependencies for FastAPI.
"""

from typing import Optional

from fastapi import Header


BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.

    A value without the ``Bearer`` scheme is taken as the token itself.
    Returns None when nothing usable is present.
    """
    if not authorization:
        return None

    value = authorization.strip()
    scheme, _, token = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        value = token.strip()

    return value or None


async def get_bearer_token(
    authorization: Optional[str] = Header(default=None)
) -> Optional[str]:
    """
    FastAPI dependency returning the request's bearer token, if any.
    Validation is left to the use case so that it runs in gate order.
    """
    return extract_bearer_token(authorization)
