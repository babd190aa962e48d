"""Tests for model to DTO mapping and published post aggregation."""

from types import SimpleNamespace

import pytest

from blog.mappers import (
    category_to_dto,
    count_published_posts,
    create_request_to_category,
    post_to_dto,
    tag_to_dto,
)
from blog.models import Category, PostStatus
from blog.schemas.categories import CreateCategoryRequest


def _posts(*statuses):
    return [SimpleNamespace(status=s) for s in statuses]


class TestCountPublishedPosts:
    """Test cases for the published post count."""

    @pytest.mark.parametrize(
        "statuses, expected",
        [
            ((), 0),
            ((PostStatus.DRAFT,), 0),
            ((PostStatus.PUBLISHED, PostStatus.DRAFT, PostStatus.PUBLISHED), 2),
            ((PostStatus.PUBLISHED,) * 5, 5),
        ],
    )
    def test_counts_only_published(self, statuses, expected):
        assert count_published_posts(_posts(*statuses)) == expected

    def test_none_counts_as_zero(self):
        assert count_published_posts(None) == 0

    def test_requires_exact_status(self):
        """Values merely resembling PUBLISHED are not counted."""
        assert count_published_posts(_posts("PUBLISHED_DRAFT", "published", "PUBLISH")) == 0


class TestCategoryMapping:
    """Test cases for category mapping."""

    def test_category_without_posts_maps_to_zero(self):
        dto = category_to_dto(Category(name='Empty'))
        assert dto.post_count == 0
        assert dto.name == 'Empty'
        assert dto.id is None

    def test_category_with_missing_posts_attribute(self):
        dto = category_to_dto(SimpleNamespace(hex_id='abc', name='Loose'))
        assert dto.model_dump() == {'id': 'abc', 'name': 'Loose', 'post_count': 0}

    def test_category_to_dto_counts_published(self, app, test_post, draft_post, test_category):
        dto = category_to_dto(test_category)
        assert dto.id == test_category.hex_id
        assert dto.post_count == 1

    def test_create_request_to_category(self):
        category = create_request_to_category(CreateCategoryRequest(name='Tech'))
        assert isinstance(category, Category)
        assert category.name == 'Tech'
        assert category.id is None
        assert category.hex_id is None


class TestPostAndTagMapping:
    """Test cases for post and tag mapping."""

    def test_tag_to_dto(self, app, test_post, test_tag):
        dto = tag_to_dto(test_tag)
        assert dto.model_dump() == {'id': test_tag.hex_id, 'name': 'python', 'post_count': 1}

    def test_post_to_dto(self, app, test_post, test_user, test_category, test_tag):
        data = post_to_dto(test_post).model_dump(mode='json')

        assert data['id'] == test_post.hex_id
        assert data['status'] == 'PUBLISHED'
        assert data['author'] == {'id': test_user.hex_id, 'name': 'Test Author'}
        assert data['category'] == {'id': test_category.hex_id, 'name': 'Test Category'}
        assert data['tags'] == [{'id': test_tag.hex_id, 'name': 'python'}]
        assert data['created_at'] is not None
