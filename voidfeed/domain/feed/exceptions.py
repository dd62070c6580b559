# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from voidfeed.shared.errors.base import DomainError, FaultClass


class PostNotFoundError(DomainError):
    code = "post_not_found"
    fault = FaultClass.NOT_FOUND

    def __init__(self, post_id: str) -> None:
        super().__init__(context={"post_id": post_id})


NotFoundError = PostNotFoundError
