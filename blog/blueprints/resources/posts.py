from __future__ import annotations

from flask import jsonify, request
from flask_login import current_user, login_required

from blog.blueprints.api import bp
from blog.decorators import validated_body
from blog.extensions import limiter
from blog.mappers import post_to_dto
from blog.schemas.posts import CreatePostRequest
from blog.services import get_services


def _viewer():
    if current_user.is_authenticated:
        return current_user._get_current_object()
    return None


@bp.get("/posts")
def list_posts():
    """List published posts, optionally filtered by category_id and/or tag_id"""
    posts = get_services().posts.list_published_posts(
        category_id=request.args.get("category_id") or None,
        tag_id=request.args.get("tag_id") or None,
    )
    return jsonify([post_to_dto(p).model_dump(mode="json") for p in posts])


@bp.get("/posts/drafts")
@login_required
def list_drafts():
    posts = get_services().posts.list_drafts(_viewer())
    return jsonify([post_to_dto(p).model_dump(mode="json") for p in posts])


@bp.get("/posts/<string:post_id>")
def get_post(post_id: str):
    post = get_services().posts.get_post(post_id, viewer=_viewer())
    return jsonify(post_to_dto(post).model_dump(mode="json"))


@bp.post("/posts")
@limiter.limit("10 per minute")
@login_required
@validated_body(CreatePostRequest)
def create_post(payload: CreatePostRequest):
    post = get_services().posts.create_post(_viewer(), payload)
    return jsonify(post_to_dto(post).model_dump(mode="json")), 201


@bp.delete("/posts/<string:post_id>")
@limiter.limit("5 per minute")
@login_required
def delete_post(post_id: str):
    get_services().posts.delete_post(post_id, _viewer())
    return "", 204
