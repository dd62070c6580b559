# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from voidfeed.shared.errors.base import DomainError, FaultClass


class DuplicateUsernameError(DomainError):
    code = "duplicate_username"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"


class AuthorizationError(DomainError):
    code = "unauthorized"
    fault = FaultClass.AUTHORIZATION


class MissingTokenError(AuthorizationError):
    code = "missing_token"


class InvalidTokenError(AuthorizationError):
    code = "invalid_token"


class ExpiredTokenError(AuthorizationError):
    code = "expired_token"
