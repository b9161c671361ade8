from __future__ import annotations

from fastapi import Header, HTTPException, status


def is_authenticated(authorization: str | None) -> bool:
    return bool(authorization and authorization.strip())


def get_credential(authorization: str | None = Header(default=None)) -> str:
    """
    Every notes route depends on this:
    - the raw Authorization header value is the caller's credential
    - it is compared verbatim against a note's `user` field
    """
    if not is_authenticated(authorization):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing credentials")
    return authorization
