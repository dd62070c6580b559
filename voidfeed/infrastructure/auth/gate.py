# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from voidfeed.domain.users.entities import SessionClaims
from voidfeed.domain.users.exceptions import AuthorizationError, InvalidTokenError
from voidfeed.domain.users.repositories import SessionIssuer
from voidfeed.shared.logging import logger

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` value.

    An absent header or an absent token part yields ``None``; a token sent
    under any other scheme is rejected as invalid.
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if not token:
        return None
    if scheme.lower() != BEARER_SCHEME:
        raise InvalidTokenError()
    return token


class AuthGate:
    def __init__(self, issuer: SessionIssuer) -> None:
        self._issuer = issuer

    def resolve(self, authorization: str | None) -> SessionClaims:
        return self._issuer.validate(extract_bearer_token(authorization))

    def required(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                claims = self.resolve(request.headers.get("Authorization"))
            except AuthorizationError as exc:
                logger.warning(
                    f"Auth failed ({exc.code}) on {request.method} {request.path}"
                )
                raise

            g.identity = claims
            g.user_id = claims.user_id
            logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner


def current_identity() -> SessionClaims:
    """Identity resolved by ``AuthGate.required`` for the current request."""
    identity = g.get("identity")
    if identity is None:
        raise RuntimeError("current_identity() called outside a gated view")
    return identity
