from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from blog.models.blog import PostStatus
from blog.schemas.tags import TagRef


class CreatePostRequest(BaseModel):
    title: str = Field(min_length=3, max_length=200)
    content: str = Field(min_length=10, max_length=50000)
    category_id: str = Field(min_length=1, max_length=32)
    tag_ids: list[str] = Field(default_factory=list, max_length=10)
    status: PostStatus

    @field_validator("title")
    @classmethod
    def title_strip(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Title must be at least 3 characters")
        return v

    @field_validator("tag_ids")
    @classmethod
    def unique_tag_ids(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))


class AuthorRef(BaseModel):
    id: str
    name: str


class CategoryRef(BaseModel):
    id: str
    name: str


class PostDto(BaseModel):
    id: str
    title: str
    content: str
    status: PostStatus
    reading_time: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: AuthorRef | None = None
    category: CategoryRef | None = None
    tags: list[TagRef] = Field(default_factory=list)
