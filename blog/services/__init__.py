"""Service objects, built once per application with their repositories injected."""
from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app
from sqlalchemy.orm import Session

from blog.repositories import CategoryRepository, PostRepository, TagRepository, UserRepository
from blog.services.auth import AuthService
from blog.services.categories import CategoryService
from blog.services.posts import PostService
from blog.services.tags import TagService

EXTENSION_KEY = "blog.services"


@dataclass(frozen=True)
class Services:
    categories: CategoryService
    tags: TagService
    posts: PostService
    auth: AuthService


def build_services(session: Session, config: dict) -> Services:
    category_repo = CategoryRepository(session)
    tag_repo = TagRepository(session)
    tag_service = TagService(tag_repo)
    return Services(
        categories=CategoryService(category_repo),
        tags=tag_service,
        posts=PostService(PostRepository(session), category_repo, tag_repo, tag_service),
        auth=AuthService(
            UserRepository(session),
            secret_key=config["JWT_SECRET_KEY"],
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
            expires_in=int(config.get("JWT_EXPIRES_IN", 86400)),
        ),
    )


def init_services(app: Flask, session: Session) -> Services:
    services = build_services(session, app.config)
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
