from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from voidfeed.domain.feed.entities import Comment, Post


class CreatePostRequestDTO(BaseModel):
    content: str | None = None
    image: str | None = None


class CommentRequestDTO(BaseModel):
    content: str | None = None


class CommentDTO(BaseModel):
    id: str
    author_id: str = Field(serialization_alias="authorId")
    author: str
    content: str
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_entity(cls, comment: Comment) -> CommentDTO:
        return cls(
            id=comment.id,
            author_id=comment.author_id,
            author=comment.author_name,
            content=comment.content,
            created_at=comment.created_at,
        )


class PostDTO(BaseModel):
    id: str
    author_id: str = Field(serialization_alias="authorId")
    author: str
    content: str | None = None
    image: str | None = None
    likes: list[str] = Field(default_factory=list)
    comments: list[CommentDTO] = Field(default_factory=list)
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entity(cls, post: Post) -> PostDTO:
        return cls(
            id=post.id,
            author_id=post.author_id,
            author=post.author_name,
            content=post.content,
            image=post.image,
            likes=list(post.likes),
            comments=[CommentDTO.from_entity(c) for c in post.comments],
            created_at=post.created_at,
        )
