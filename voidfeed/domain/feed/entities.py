# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Feed entities: posts with their like-sets and comment threads."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Comment:
    """Immutable reply appended to a single post."""

    id: str
    author_id: str
    author_name: str
    content: str
    created_at: datetime


@dataclass(slots=True)
class Post:
    """A feed entry; likes and comments are mutated in place by the store."""

    id: str
    author_id: str
    author_name: str
    created_at: datetime
    content: str | None = None
    image: str | None = None
    likes: dict[str, None] = field(default_factory=dict)
    comments: list[Comment] = field(default_factory=list)

    @property
    def like_count(self) -> int:
        return len(self.likes)

    def toggle_like(self, user_id: str) -> int:
        """Flip ``user_id`` membership in the like-set and return the new count."""

        if user_id in self.likes:
            del self.likes[user_id]
        else:
            self.likes[user_id] = None
        return len(self.likes)

    def add_comment(self, comment: Comment) -> None:
        self.comments.append(comment)

    def snapshot(self) -> Post:
        return Post(
            id=self.id,
            author_id=self.author_id,
            author_name=self.author_name,
            created_at=self.created_at,
            content=self.content,
            image=self.image,
            likes=dict(self.likes),
            comments=list(self.comments),
        )
