"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from voidfeed.application.services.password_hashing import WerkzeugPasswordHasher
from voidfeed.application.services.session_tokens import JoseSessionIssuer
from voidfeed.application.use_cases.feed import (
    AddCommentUseCase,
    CreatePostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
)
from voidfeed.application.use_cases.users.login_user import LoginUserUseCase
from voidfeed.application.use_cases.users.register_user import RegisterUserUseCase
from voidfeed.domain.users.repositories import PasswordHasher
from voidfeed.infrastructure.auth import AuthGate
from voidfeed.infrastructure.repositories.feed.in_memory_post_repository import (
    InMemoryPostRepository,
)
from voidfeed.infrastructure.repositories.users.in_memory_user_repository import (
    InMemoryUserRepository,
)
from voidfeed.interfaces.http.controllers.auth_controller import AuthController
from voidfeed.interfaces.http.controllers.misc_controller import MiscController
from voidfeed.interfaces.http.controllers.posts_controller import PostsController
from voidfeed.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self.config = config or load_config()
        self._password_hasher_override = password_hasher

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher_override or WerkzeugPasswordHasher()

    @cached_property
    def session_issuer(self) -> JoseSessionIssuer:
        return JoseSessionIssuer(
            self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
            ttl=timedelta(days=self.config.token_ttl_days),
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(self.session_issuer)

    @cached_property
    def user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository()

    @cached_property
    def post_repository(self) -> InMemoryPostRepository:
        return InMemoryPostRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.session_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository)

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository)

    @cached_property
    def toggle_like_use_case(self) -> ToggleLikeUseCase:
        return ToggleLikeUseCase(posts=self.post_repository)

    @cached_property
    def add_comment_use_case(self) -> AddCommentUseCase:
        return AddCommentUseCase(posts=self.post_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            gate=self.auth_gate,
            create_post_use_case=self.create_post_use_case,
            list_posts_use_case=self.list_posts_use_case,
            toggle_like_use_case=self.toggle_like_use_case,
            add_comment_use_case=self.add_comment_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
