from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from blog.models.blog import Category, Post, PostStatus, Tag, post_tags


class _Repository:
    """Unit-of-work plumbing shared by the blog repositories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


# Category repositories
class CategoryRepository(_Repository):
    def list_with_posts(self) -> list[Category]:
        stmt = select(Category).options(selectinload(Category.posts)).order_by(Category.name)
        return list(self.session.execute(stmt).scalars())

    def get_by_hex_id(self, hex_id: str, *, for_update: bool = False) -> Optional[Category]:
        stmt = select(Category).filter_by(hex_id=hex_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self.session.execute(stmt).scalar_one_or_none()

    def exists_by_name_ignore_case(self, name: str) -> bool:
        stmt = select(Category.id).where(func.lower(Category.name) == name.lower()).limit(1)
        return self.session.execute(stmt).first() is not None

    def count_posts(self, category: Category) -> int:
        stmt = select(func.count(Post.id)).where(Post.category_id == category.id)
        return self.session.execute(stmt).scalar_one()

    def add(self, category: Category) -> Category:
        self.session.add(category)
        self.session.flush()
        return category

    def delete(self, category: Category) -> None:
        self.session.delete(category)
        self.session.flush()


# Tag repositories
class TagRepository(_Repository):
    def list_with_posts(self) -> list[Tag]:
        stmt = select(Tag).options(selectinload(Tag.posts)).order_by(Tag.name)
        return list(self.session.execute(stmt).scalars())

    def get_by_hex_id(self, hex_id: str, *, for_update: bool = False) -> Optional[Tag]:
        stmt = select(Tag).filter_by(hex_id=hex_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_names_ignore_case(self, names: Iterable[str]) -> list[Tag]:
        lowered = {n.lower() for n in names}
        if not lowered:
            return []
        stmt = select(Tag).options(selectinload(Tag.posts)).where(func.lower(Tag.name).in_(lowered))
        return list(self.session.execute(stmt).scalars())

    def find_by_hex_ids(self, hex_ids: Iterable[str]) -> list[Tag]:
        ids = set(hex_ids)
        if not ids:
            return []
        return list(self.session.execute(select(Tag).where(Tag.hex_id.in_(ids))).scalars())

    def count_posts(self, tag: Tag) -> int:
        stmt = select(func.count()).select_from(post_tags).where(post_tags.c.tag_id == tag.id)
        return self.session.execute(stmt).scalar_one()

    def add_all(self, tags: list[Tag]) -> list[Tag]:
        self.session.add_all(tags)
        self.session.flush()
        return tags

    def delete(self, tag: Tag) -> None:
        self.session.delete(tag)
        self.session.flush()


# Post repositories
class PostRepository(_Repository):
    def _base_query(self):
        return select(Post).options(
            selectinload(Post.author),
            selectinload(Post.category),
            selectinload(Post.tags),
        )

    def list_posts(
        self,
        *,
        status: PostStatus,
        category_id: int | None = None,
        tag_id: int | None = None,
    ) -> list[Post]:
        stmt = self._base_query().filter_by(status=status)
        if category_id is not None:
            stmt = stmt.filter_by(category_id=category_id)
        if tag_id is not None:
            stmt = stmt.where(Post.tags.any(Tag.id == tag_id))
        stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc())
        return list(self.session.execute(stmt).scalars())

    def list_drafts(self, author_id: int) -> list[Post]:
        stmt = (
            self._base_query()
            .filter_by(status=PostStatus.DRAFT, author_id=author_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(self.session.execute(stmt).scalars())

    def get_by_hex_id(self, hex_id: str) -> Optional[Post]:
        return self.session.execute(self._base_query().filter_by(hex_id=hex_id)).scalar_one_or_none()

    def add(self, post: Post) -> Post:
        self.session.add(post)
        self.session.flush()
        return post

    def delete(self, post: Post) -> None:
        self.session.delete(post)
        self.session.flush()
