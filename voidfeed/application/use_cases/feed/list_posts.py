# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from voidfeed.domain.feed.entities import Post
from voidfeed.domain.feed.repositories import PostRepository


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self) -> list[Post]:
        return self._posts.list_newest_first()
