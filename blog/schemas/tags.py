from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CreateTagsRequest(BaseModel):
    names: list[str] = Field(min_length=1, max_length=10)

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        cleaned: list[str] = []
        seen: set[str] = set()
        for raw in v:
            name = raw.strip()
            if not 2 <= len(name) <= 30:
                raise ValueError("Tag name must be between 2 and 30 characters")
            if not all(ch.isalnum() or ch in " _-" for ch in name):
                raise ValueError("Tag name can only contain letters, numbers, spaces, underscores and hyphens")
            # Collapse duplicates that differ only by case
            if name.lower() not in seen:
                seen.add(name.lower())
                cleaned.append(name)
        return cleaned


class TagRef(BaseModel):
    id: str
    name: str


class TagDto(TagRef):
    post_count: int = 0
