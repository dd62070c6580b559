# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from voidfeed.application.use_cases.feed import (
    AddCommentUseCase,
    CreatePostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
)
from voidfeed.infrastructure.auth import AuthGate, current_identity
from voidfeed.interfaces.http.dto.common import dump, parse_body
from voidfeed.interfaces.http.dto.posts import (
    CommentDTO,
    CommentRequestDTO,
    CreatePostRequestDTO,
    PostDTO,
)


class PostsController:
    def __init__(
        self,
        *,
        gate: AuthGate,
        create_post_use_case: CreatePostUseCase,
        list_posts_use_case: ListPostsUseCase,
        toggle_like_use_case: ToggleLikeUseCase,
        add_comment_use_case: AddCommentUseCase,
    ) -> None:
        self._gate = gate
        self._create_post = create_post_use_case
        self._list_posts = list_posts_use_case
        self._toggle_like = toggle_like_use_case
        self._add_comment = add_comment_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/api/posts")
        bp.add_url_rule("", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("", view_func=self._gate.required(self.create), methods=["POST"])
        bp.add_url_rule(
            "/<post_id>/like",
            view_func=self._gate.required(self.like),
            methods=["POST"],
        )
        bp.add_url_rule(
            "/<post_id>/comments",
            view_func=self._gate.required(self.comment),
            methods=["POST"],
        )
        return bp

    def list_posts(self) -> tuple[Response, int]:
        posts = self._list_posts.execute()
        return jsonify({"posts": [dump(PostDTO.from_entity(p)) for p in posts]}), 200

    def create(self) -> tuple[Response, int]:
        dto = parse_body(CreatePostRequestDTO, request.get_json(silent=True))

        identity = current_identity()
        post = self._create_post.execute(
            identity.user_id, identity.username, dto.content, dto.image
        )
        return jsonify({"post": dump(PostDTO.from_entity(post))}), 200

    def like(self, post_id: str) -> tuple[Response, int]:
        likes = self._toggle_like.execute(post_id, current_identity().user_id)
        return jsonify({"likes": likes}), 200

    def comment(self, post_id: str) -> tuple[Response, int]:
        dto = parse_body(CommentRequestDTO, request.get_json(silent=True))

        identity = current_identity()
        comment = self._add_comment.execute(
            post_id, identity.user_id, identity.username, dto.content
        )
        return jsonify({"comment": dump(CommentDTO.from_entity(comment))}), 200
