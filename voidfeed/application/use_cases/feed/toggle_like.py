# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from voidfeed.domain.feed.repositories import PostRepository
from voidfeed.shared.logging import logger


class ToggleLikeUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str, user_id: str) -> int:
        likes = self._posts.toggle_like(post_id, user_id)
        logger.info(f"posts.like: ok post_id={post_id} user_id={user_id} likes={likes}")
        return likes
