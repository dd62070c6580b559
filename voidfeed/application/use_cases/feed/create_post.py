# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from voidfeed.domain.feed.entities import Post
from voidfeed.domain.feed.repositories import PostRepository
from voidfeed.shared.errors import ValidationError
from voidfeed.shared.logging import logger


def _present(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(
        self,
        author_id: str,
        author_name: str,
        content: str | None = None,
        image: str | None = None,
    ) -> Post:
        content = _present(content)
        image = _present(image)
        if content is None and image is None:
            raise ValidationError(
                code="post_empty",
                context={"fields": ["content", "image"]},
            )

        post = Post(
            id=str(uuid.uuid4()),
            author_id=author_id,
            author_name=author_name,
            created_at=datetime.now(UTC),
            content=content,
            image=image,
        )
        created = self._posts.prepend(post)
        logger.info(f"posts.create: ok post_id={created.id} author_id={author_id}")
        return created
