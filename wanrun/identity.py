"""Verified caller identity.

An ``Identity`` is resolved once per request from the bearer token and then
passed explicitly to every service call that acts on behalf of the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import wanrun.repositories.dog_owner as dog_owner_repo
from wanrun.core.security import decode_token
from wanrun.errors import ErrorDomain, ServerError, UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Identity:
    """The authenticated dog owner and the claims of the token that proved it."""

    dog_owner_id: int
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def jti(self) -> str | None:
        return self.claims.get("jti")

    @property
    def expires_at(self) -> datetime | None:
        exp = self.claims.get("exp")
        if exp is None:
            return None
        return datetime.fromtimestamp(exp, tz=timezone.utc)


def resolve_identity(token: str | None, db: Session) -> Identity:
    """Verify a bearer token and return the caller's identity.

    Raises:
        UnauthorizedError: If the token is missing, invalid, expired, not an
            access token, has no numeric subject, or its dog owner is gone.
        ServerError: If the dog owner lookup fails.
    """
    if not token:
        raise UnauthorizedError("Not authenticated")

    payload = decode_token(token)
    if payload is None:
        raise UnauthorizedError()

    # Only access tokens identify a caller
    if payload.get("type") != "access":
        raise UnauthorizedError()

    try:
        dog_owner_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise UnauthorizedError()

    try:
        dog_owner = dog_owner_repo.get_dog_owner_by_id(db, dog_owner_id)
    except SQLAlchemyError as e:
        raise ServerError(
            "Failed to look up dog owner", domain=ErrorDomain.DOG_OWNER, cause=e
        ) from e

    if dog_owner is None:
        logger.warning("Token subject %s does not match any dog owner", dog_owner_id)
        raise UnauthorizedError("Dog owner not found")

    return Identity(dog_owner_id=dog_owner_id, claims=payload)
