# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from voidfeed.domain.users.entities import User, normalise_username
from voidfeed.domain.users.exceptions import DuplicateUsernameError
from voidfeed.domain.users.repositories import PasswordHasher, SessionIssuer, UserRepository
from voidfeed.shared.errors import InfrastructureError, missing_fields_error
from voidfeed.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(
        self, username: str | None, password: str | None, email: str | None = None
    ) -> tuple[User, str]:
        username = normalise_username(username)
        missing = [name for name, value in (("username", username), ("password", password)) if not value]
        if missing:
            raise missing_fields_error(*missing)

        # fast path; the repository re-checks atomically on insert
        if self._users.find_by_username(username):
            raise DuplicateUsernameError(context={"username": username})

        try:
            hashed = self._password_hasher.hash(password)
        except Exception as exc:
            logger.exception(f"auth.register: password hashing failed (username={username})")
            raise InfrastructureError(code="password_hashing_failed") from exc

        user = User(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=hashed,
            created_at=datetime.now(UTC),
            email=email or None,
        )
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.id, persisted.username)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted, token
