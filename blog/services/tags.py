from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError

from blog.errors import DuplicateNameError, NotFoundError, TagInUseError
from blog.models.blog import Tag
from blog.repositories.blog import TagRepository

log = structlog.get_logger(__name__)


class TagService:
    def __init__(self, tags: TagRepository) -> None:
        self.tags = tags

    def list_tags(self) -> list[Tag]:
        return self.tags.list_with_posts()

    def create_tags(self, names: list[str]) -> list[Tag]:
        """Return tags for ``names``, creating the ones that do not exist yet.

        Matching is case-insensitive, so asking for ``"Python"`` when ``"python"``
        exists returns the stored tag unchanged.
        """
        existing = self.tags.find_by_names_ignore_case(names)
        known = {t.name.lower() for t in existing}
        new_tags = [Tag(name=name) for name in names if name.lower() not in known]
        if new_tags:
            try:
                self.tags.add_all(new_tags)
                self.tags.commit()
            except IntegrityError:
                self.tags.rollback()
                raise DuplicateNameError("Tag was created concurrently, retry the request")
            log.info("tags_created", names=[t.name for t in new_tags])
        return sorted(existing + new_tags, key=lambda t: t.name.lower())

    def get_tags_by_ids(self, hex_ids: list[str]) -> list[Tag]:
        found = self.tags.find_by_hex_ids(hex_ids)
        missing = set(hex_ids) - {t.hex_id for t in found}
        if missing:
            raise NotFoundError(f"Tags not found: {', '.join(sorted(missing))}")
        return found

    def delete_tag(self, hex_id: str) -> None:
        tag = self.tags.get_by_hex_id(hex_id, for_update=True)
        if tag is None:
            self.tags.rollback()
            raise NotFoundError(f"Tag {hex_id} not found")

        post_count = self.tags.count_posts(tag)
        if post_count:
            self.tags.rollback()
            log.info("tag_delete_rejected", tag_id=hex_id, post_count=post_count)
            raise TagInUseError("Tag has posts associated with it")

        try:
            self.tags.delete(tag)
            self.tags.commit()
        except IntegrityError:
            self.tags.rollback()
            raise TagInUseError("Tag has posts associated with it")
        log.info("tag_deleted", tag_id=hex_id)
