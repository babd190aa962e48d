"""Test configuration and fixtures for the blog API."""

from datetime import datetime, timezone
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from blog import create_app
from blog.extensions import db
from blog.models import User, Category, Post, PostStatus, Tag
from blog.services import get_services
from blog.utils.crypto import hash_password


@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    # Use in-memory SQLite for each test
    test_config = {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'JWT_SECRET_KEY': 'test-jwt-secret-key',
        'JWT_ALGORITHM': 'HS256',
        'JWT_EXPIRES_IN': 86400,
        'RATELIMIT_ENABLED': False,  # Disable rate limiting for tests
    }

    # Create app with test config
    app = create_app(test_config)

    with app.app_context():
        # Create all tables
        db.create_all()
        yield app

        # Cleanup
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def services(app: Flask):
    """Service objects wired to the test database."""
    return get_services()


@pytest.fixture
def test_user(app: Flask):
    """Create a test author."""
    user = User(
        email='author@example.com',
        name='Test Author',
        password_hash=hash_password('authorpassword'),
        created_at=datetime.now(timezone.utc)
    )
    db.session.add(user)
    db.session.commit()
    db.session.refresh(user)
    yield user


@pytest.fixture
def other_user(app: Flask):
    """Create a second author."""
    user = User(
        email='other@example.com',
        name='Other Author',
        password_hash=hash_password('otherpassword'),
    )
    db.session.add(user)
    db.session.commit()
    db.session.refresh(user)
    yield user


@pytest.fixture
def test_category(app: Flask):
    """Create a test category."""
    category = Category(name='Test Category')
    db.session.add(category)
    db.session.commit()
    db.session.refresh(category)
    yield category


@pytest.fixture
def test_tag(app: Flask):
    """Create a test tag."""
    tag = Tag(name='python')
    db.session.add(tag)
    db.session.commit()
    db.session.refresh(tag)
    yield tag


def make_post(author: User, category: Category, status: PostStatus = PostStatus.PUBLISHED,
              title: str = 'Test Post', tags: list[Tag] | None = None) -> Post:
    post = Post(
        title=title,
        content='This is the content of a test post.',
        status=status,
        reading_time=1,
        author=author,
        category=category,
        tags=tags or [],
    )
    db.session.add(post)
    db.session.commit()
    db.session.refresh(post)
    return post


@pytest.fixture
def post_factory(app: Flask):
    """Callable creating committed posts."""
    return make_post


@pytest.fixture
def test_post(app: Flask, test_user: User, test_category: Category, test_tag: Tag):
    """Create a published test post."""
    yield make_post(test_user, test_category, tags=[test_tag])


@pytest.fixture
def draft_post(app: Flask, test_user: User, test_category: Category):
    """Create a draft test post."""
    yield make_post(test_user, test_category, status=PostStatus.DRAFT, title='Draft Post')


@pytest.fixture
def auth_headers(services, test_user: User) -> dict[str, str]:
    """Authorization header carrying a valid bearer token for test_user."""
    token = services.auth.generate_token(test_user)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def other_auth_headers(services, other_user: User) -> dict[str, str]:
    token = services.auth.generate_token(other_user)
    return {'Authorization': f'Bearer {token}'}
