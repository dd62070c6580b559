from __future__ import annotations

import pytest

from voidfeed.application.services.session_tokens import JoseSessionIssuer
from voidfeed.application.use_cases.users.login_user import LoginUserUseCase
from voidfeed.application.use_cases.users.register_user import RegisterUserUseCase
from voidfeed.domain.users.exceptions import DuplicateUsernameError, InvalidCredentialsError
from voidfeed.domain.users.repositories import PasswordHasher
from voidfeed.infrastructure.repositories.users.in_memory_user_repository import (
    InMemoryUserRepository,
)
from voidfeed.shared.errors import FaultClass, InfrastructureError, ValidationError


class ExplodingHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        raise RuntimeError("hash backend unavailable")

    def verify(self, password: str, hashed: str) -> bool:
        raise RuntimeError("hash backend unavailable")


class CountingHasher(PasswordHasher):
    def __init__(self, inner: PasswordHasher) -> None:
        self._inner = inner
        self.verify_calls = 0

    def hash(self, password: str) -> str:
        return self._inner.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return self._inner.verify(password, hashed)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def register(users, issuer, hasher) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=issuer, password_hasher=hasher)


@pytest.fixture()
def login(users, issuer, hasher) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=issuer, password_hasher=hasher)


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository, issuer: JoseSessionIssuer
) -> None:
    user, token = register.execute("alice", "secret123", "alice@example.com")

    assert user.username == "alice"
    assert user.email == "alice@example.com"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_username("alice") == user
    claims = issuer.validate(token)
    assert (claims.user_id, claims.username) == (user.id, "alice")


def test_register_then_verify_returns_same_user(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    registered, _ = register.execute("alice", "secret123")

    verified = login.verify("alice", "secret123")

    assert verified.id == registered.id


@pytest.mark.parametrize("login_name", [" ali", "ali", "ali  "])
def test_padded_username_logs_in_with_same_credentials(
    register: RegisterUserUseCase, login: LoginUserUseCase, login_name: str
) -> None:
    registered, _ = register.execute(" ali", "pw123")

    verified = login.verify(login_name, "pw123")

    assert registered.username == "ali"
    assert verified.id == registered.id


def test_padded_username_counts_as_duplicate(register: RegisterUserUseCase) -> None:
    register.execute("ali", "pw123")

    with pytest.raises(DuplicateUsernameError):
        register.execute("  ali ", "pw123")


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute("alice", "secret123")

    with pytest.raises(DuplicateUsernameError) as info:
        register.execute("alice", "completely-different", "other@example.com")

    assert info.value.fault is FaultClass.CLIENT_INPUT


@pytest.mark.parametrize(
    ("username", "password", "missing"),
    [
        ("", "secret", ["username"]),
        (None, "secret", ["username"]),
        ("   ", "secret", ["username"]),
        ("alice", "", ["password"]),
        ("alice", None, ["password"]),
        (None, None, ["password", "username"]),
    ],
)
def test_register_requires_username_and_password(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    username: str | None,
    password: str | None,
    missing: list[str],
) -> None:
    with pytest.raises(ValidationError) as info:
        register.execute(username, password)

    assert info.value.context is not None
    assert info.value.context["fields"] == missing
    assert len(users) == 0


def test_register_hashing_failure_is_server_fault(users, issuer) -> None:
    use_case = RegisterUserUseCase(users=users, tokens=issuer, password_hasher=ExplodingHasher())

    with pytest.raises(InfrastructureError) as info:
        use_case.execute("alice", "secret123")

    assert info.value.fault is FaultClass.SERVER
    assert info.value.code == "password_hashing_failed"
    assert len(users) == 0


def test_login_user_success(register: RegisterUserUseCase, login: LoginUserUseCase, issuer) -> None:
    registered, _ = register.execute("alice", "secret123")

    user, token = login.execute("alice", "secret123")

    assert user.id == registered.id
    assert issuer.validate(token).user_id == registered.id


def test_login_failures_are_indistinguishable(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice", "secret123")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("bob", "secret123")

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()


def test_login_unknown_user_still_runs_one_hash_check(users, issuer, hasher) -> None:
    counting = CountingHasher(hasher)
    login = LoginUserUseCase(users=users, tokens=issuer, password_hasher=counting)

    with pytest.raises(InvalidCredentialsError):
        login.verify("ghost", "whatever")

    assert counting.verify_calls == 1


def test_login_with_missing_fields_is_invalid_credentials(login: LoginUserUseCase) -> None:
    with pytest.raises(InvalidCredentialsError):
        login.execute(None, "secret123")
    with pytest.raises(InvalidCredentialsError):
        login.execute("alice", "")
