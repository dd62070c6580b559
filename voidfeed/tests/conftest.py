from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient

from voidfeed.app import create_app
from voidfeed.application.services.session_tokens import JoseSessionIssuer
from voidfeed.container import Container
from voidfeed.domain.users.repositories import PasswordHasher
from voidfeed.shared.config import AppConfig

TEST_SECRET = "test-signing-secret"


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class FrozenClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture()
def issuer(clock: FrozenClock) -> JoseSessionIssuer:
    return JoseSessionIssuer(TEST_SECRET, clock=clock)


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(APP_ENV="test", JWT_SECRET=TEST_SECRET)  # type: ignore[call-arg]


@pytest.fixture()
def container(config: AppConfig, hasher: DeterministicHasher) -> Container:
    return Container(config, password_hasher=hasher)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
