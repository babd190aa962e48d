from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select

from blog.models.user import User
from blog.repositories.blog import _Repository


class UserRepository(_Repository):
    def get_by_hex_id(self, hex_id: str) -> Optional[User]:
        return self.session.execute(select(User).filter_by(hex_id=hex_id)).scalar_one_or_none()

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        return self.session.execute(stmt).scalar_one_or_none()

    def add(self, user: User) -> User:
        self.session.add(user)
        self.session.flush()
        return user

    def count(self) -> int:
        return self.session.execute(select(func.count(User.id))).scalar_one()
