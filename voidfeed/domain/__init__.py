# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .feed.entities import Comment, Post
from .feed.exceptions import NotFoundError, PostNotFoundError
from .users.entities import SessionClaims, User
from .users.exceptions import (
    AuthorizationError,
    DuplicateUsernameError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)

__all__ = [
    "AuthorizationError",
    "Comment",
    "DuplicateUsernameError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "NotFoundError",
    "Post",
    "PostNotFoundError",
    "SessionClaims",
    "User",
]
