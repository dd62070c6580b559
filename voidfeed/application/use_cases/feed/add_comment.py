# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from voidfeed.domain.feed.entities import Comment
from voidfeed.domain.feed.repositories import PostRepository
from voidfeed.shared.errors import missing_fields_error
from voidfeed.shared.logging import logger


class AddCommentUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(
        self,
        post_id: str,
        author_id: str,
        author_name: str,
        content: str | None,
    ) -> Comment:
        # content is validated before the post lookup
        if content is None or not content.strip():
            raise missing_fields_error("content")

        comment = Comment(
            id=str(uuid.uuid4()),
            author_id=author_id,
            author_name=author_name,
            content=content,
            created_at=datetime.now(UTC),
        )
        appended = self._posts.append_comment(post_id, comment)
        logger.info(f"posts.comment: ok post_id={post_id} comment_id={appended.id}")
        return appended
