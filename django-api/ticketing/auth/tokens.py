"""Signed, time-limited session credentials (JWT)."""

from datetime import datetime, timedelta, timezone

import jwt

from ticketing.auth.identity import Identity
from ticketing.domain.value_objects import UserId


class TokenCodec:
    """Issues and verifies HS256 tokens carrying ``{userId, isAdmin}``."""

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = timedelta(hours=24),
        algorithm: str = "HS256",
    ) -> None:
        self._secret = secret
        self._lifetime = lifetime
        self._algorithm = algorithm

    def issue(self, user_id: UserId, is_admin: bool, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "userId": user_id.value,
            "isAdmin": is_admin,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity | None:
        """Return the identity encoded in ``token``, or None if it cannot be trusted.

        Bad signatures, expired tokens and malformed payloads are all reported
        the same way; callers decide whether that means anonymous or 401.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.PyJWTError:
            return None

        user_id = payload.get("userId")
        is_admin = payload.get("isAdmin")
        if not isinstance(is_admin, bool):
            return None
        try:
            return Identity(user_id=UserId(user_id), is_admin=is_admin)
        except ValueError:
            return None
