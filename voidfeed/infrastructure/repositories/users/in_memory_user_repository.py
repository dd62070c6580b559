# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from threading import Lock

from voidfeed.domain.users.entities import User
from voidfeed.domain.users.exceptions import DuplicateUsernameError
from voidfeed.domain.users.repositories import UserRepository


class InMemoryUserRepository(UserRepository):
    """Process-local user collection with an atomic unique-username insert."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._by_username: dict[str, User] = {}
        self._by_id: dict[str, User] = {}

    def find_by_username(self, username: str) -> User | None:
        with self._lock:
            return self._by_username.get(username)

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._by_id.get(user_id)

    def add(self, user: User) -> User:
        with self._lock:
            if user.username in self._by_username:
                raise DuplicateUsernameError(context={"username": user.username})
            self._by_username[user.username] = user
            self._by_id[user.id] = user
        return user

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)
