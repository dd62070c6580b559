# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from voidfeed.domain.users.entities import User, normalise_username
from voidfeed.domain.users.exceptions import InvalidCredentialsError
from voidfeed.domain.users.repositories import PasswordHasher, SessionIssuer, UserRepository
from voidfeed.shared.errors import InfrastructureError
from voidfeed.shared.logging import logger

_DUMMY_PASSWORD = "voidfeed-timing-equaliser"


class LoginUserUseCase:
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

    @cached_property
    def _dummy_hash(self) -> str:
        return self._password_hasher.hash(_DUMMY_PASSWORD)

    def verify(self, username: str | None, password: str | None) -> User:
        """Return the user owning these credentials.

        Unknown usernames and wrong passwords raise the same
        ``InvalidCredentialsError``; both paths run one hash comparison.
        """
        username = normalise_username(username)
        if not username or not password:
            raise InvalidCredentialsError()

        user = self._users.find_by_username(username)
        try:
            if user is None:
                self._password_hasher.verify(password, self._dummy_hash)
                password_valid = False
            else:
                password_valid = self._password_hasher.verify(password, user.password_hash)
        except Exception as exc:
            logger.exception("auth.login: password verification failed")
            raise InfrastructureError(code="password_verification_failed") from exc

        if user is None or not password_valid:
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()
        return user

    def execute(self, username: str | None, password: str | None) -> tuple[User, str]:
        user = self.verify(username, password)
        token = self._tokens.issue(user.id, user.username)
        logger.info(f"auth.login: ok user_id={user.id}")
        return user, token
