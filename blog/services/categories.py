from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError

from blog.errors import CategoryNotEmptyError, DuplicateNameError, NotFoundError
from blog.models.blog import Category
from blog.repositories.blog import CategoryRepository

log = structlog.get_logger(__name__)


class CategoryService:
    """Category lifecycle: unique names on create, no deletion while posts are attached."""

    def __init__(self, categories: CategoryRepository) -> None:
        self.categories = categories

    def list_categories(self) -> list[Category]:
        return self.categories.list_with_posts()

    def get_category(self, hex_id: str) -> Category:
        category = self.categories.get_by_hex_id(hex_id)
        if category is None:
            raise NotFoundError(f"Category {hex_id} not found")
        return category

    def create_category(self, candidate: Category) -> Category:
        if self.categories.exists_by_name_ignore_case(candidate.name):
            log.info("category_create_rejected", name=candidate.name, reason="duplicate_name")
            raise DuplicateNameError(f"Category already exists: {candidate.name}")
        try:
            self.categories.add(candidate)
            self.categories.commit()
        except IntegrityError:
            # Lost a race with a concurrent create of the same name
            self.categories.rollback()
            log.info("category_create_rejected", name=candidate.name, reason="unique_index")
            raise DuplicateNameError(f"Category already exists: {candidate.name}")
        log.info("category_created", category_id=candidate.hex_id, name=candidate.name)
        return candidate

    def delete_category(self, hex_id: str) -> None:
        category = self.categories.get_by_hex_id(hex_id, for_update=True)
        if category is None:
            self.categories.rollback()
            raise NotFoundError(f"Category {hex_id} not found")

        post_count = self.categories.count_posts(category)
        if post_count:
            self.categories.rollback()
            log.info("category_delete_rejected", category_id=hex_id, post_count=post_count)
            raise CategoryNotEmptyError("Category has posts associated with it")

        try:
            self.categories.delete(category)
            self.categories.commit()
        except IntegrityError:
            # A post was attached between the check and the delete
            self.categories.rollback()
            raise CategoryNotEmptyError("Category has posts associated with it")
        log.info("category_deleted", category_id=hex_id)
