# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Comment, Post


class PostRepository(Protocol):
    def prepend(self, post: Post) -> Post: ...
    def list_newest_first(self) -> list[Post]: ...
    def get(self, post_id: str) -> Post: ...
    def toggle_like(self, post_id: str, user_id: str) -> int: ...
    def append_comment(self, post_id: str, comment: Comment) -> Comment: ...
