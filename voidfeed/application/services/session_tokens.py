"""
Signed session tokens.

Tokens are HS256 JWTs carrying the user id and username. Nothing is stored
server-side: a token is accepted while its signature verifies against the
process-wide secret and the current time has not passed its ``exp`` claim.
There is no revocation list, so a leaked token stays valid until it expires.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt
from jose.exceptions import JWTError

from voidfeed.domain.users.entities import SessionClaims
from voidfeed.domain.users.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from voidfeed.domain.users.repositories import SessionIssuer
from voidfeed.shared.logging import logger

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JoseSessionIssuer(SessionIssuer):
    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = ALGORITHM,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    def issue(self, user_id: str, username: str) -> str:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._ttl
        to_encode = {
            "sub": user_id,
            "userId": user_id,
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)

    def validate(self, token: str | None) -> SessionClaims:
        if not token:
            raise MissingTokenError()

        try:
            # expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            logger.debug(f"session.validate: rejected ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        claims = self._claims_from(payload)
        if claims.is_expired(self._clock()):
            raise ExpiredTokenError(context={"expired_at": claims.expires_at.isoformat()})
        return claims

    @staticmethod
    def _claims_from(payload: dict[str, Any]) -> SessionClaims:
        user_id = payload.get("userId")
        username = payload.get("username")
        iat = payload.get("iat")
        exp = payload.get("exp")

        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError(context={"claim": "userId"})
        if not isinstance(username, str) or not username:
            raise InvalidTokenError(context={"claim": "username"})
        for name, value in (("iat", iat), ("exp", exp)):
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise InvalidTokenError(context={"claim": name})

        try:
            issued_at = datetime.fromtimestamp(iat, UTC)
            expires_at = datetime.fromtimestamp(exp, UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidTokenError(context={"claim": "exp"}) from exc

        return SessionClaims(
            user_id=user_id,
            username=username,
            issued_at=issued_at,
            expires_at=expires_at,
        )
