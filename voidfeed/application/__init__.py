# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import WerkzeugPasswordHasher
from .services.session_tokens import JoseSessionIssuer
from .use_cases.feed import (
    AddCommentUseCase,
    CreatePostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
)
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "AddCommentUseCase",
    "CreatePostUseCase",
    "JoseSessionIssuer",
    "ListPostsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "ToggleLikeUseCase",
    "WerkzeugPasswordHasher",
]
