from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CreateCategoryRequest(BaseModel):
    name: str = Field(min_length=2, max_length=50)

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError("Name not provided")
        return v


class CategoryDto(BaseModel):
    id: str | None = None
    name: str
    post_count: int = 0
