"""API key authentication for the fare service endpoints."""

import secrets

from fastapi import Header, HTTPException, Request, status


def verify_api_key(request: Request, x_api_key: str | None = Header(default=None)) -> str:
    """Reject requests whose X-API-Key header does not match the configured key."""
    expected: str = request.app.state.api_key
    if not x_api_key or not secrets.compare_digest(x_api_key, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
        )
    return x_api_key
