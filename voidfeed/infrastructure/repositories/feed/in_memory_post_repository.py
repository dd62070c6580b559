# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading

from voidfeed.domain.feed.entities import Comment, Post
from voidfeed.domain.feed.exceptions import PostNotFoundError
from voidfeed.domain.feed.repositories import PostRepository


class InMemoryPostRepository(PostRepository):
    """
    Process-local feed.

    ``_guard`` protects the post sequence, the id index and the lock registry.
    Each post has its own lock guarding its like-set and comments, so like and
    comment mutations on different posts do not contend with each other.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._posts: list[Post] = []
        self._index: dict[str, Post] = {}
        self._locks: dict[str, threading.Lock] = {}

    def _entry(self, post_id: str) -> tuple[Post, threading.Lock]:
        with self._guard:
            post = self._index.get(post_id)
            if post is None:
                raise PostNotFoundError(post_id)
            return post, self._locks[post_id]

    def prepend(self, post: Post) -> Post:
        with self._guard:
            self._index[post.id] = post
            self._locks[post.id] = threading.Lock()
            # stored oldest first, exposed newest first
            self._posts.append(post)
        return post.snapshot()

    def list_newest_first(self) -> list[Post]:
        with self._guard:
            entries = [(post, self._locks[post.id]) for post in reversed(self._posts)]
        snapshots = []
        for post, lock in entries:
            with lock:
                snapshots.append(post.snapshot())
        return snapshots

    def get(self, post_id: str) -> Post:
        post, lock = self._entry(post_id)
        with lock:
            return post.snapshot()

    def toggle_like(self, post_id: str, user_id: str) -> int:
        post, lock = self._entry(post_id)
        with lock:
            return post.toggle_like(user_id)

    def append_comment(self, post_id: str, comment: Comment) -> Comment:
        post, lock = self._entry(post_id)
        with lock:
            post.add_comment(comment)
        return comment

    def __len__(self) -> int:
        with self._guard:
            return len(self._posts)
