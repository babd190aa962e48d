from __future__ import annotations

from flask import jsonify
from flask_login import login_required

from blog.blueprints.api import bp
from blog.decorators import validated_body
from blog.extensions import limiter
from blog.mappers import tag_to_dto
from blog.schemas.tags import CreateTagsRequest
from blog.services import get_services


@bp.get("/tags")
def list_tags():
    tags = get_services().tags.list_tags()
    return jsonify([tag_to_dto(t).model_dump(mode="json") for t in tags])


@bp.post("/tags")
@limiter.limit("10 per minute")
@login_required
@validated_body(CreateTagsRequest)
def create_tags(payload: CreateTagsRequest):
    """Create tags by name; names that already exist are returned as they are"""
    tags = get_services().tags.create_tags(payload.names)
    return jsonify([tag_to_dto(t).model_dump(mode="json") for t in tags]), 201


@bp.delete("/tags/<string:tag_id>")
@limiter.limit("10 per minute")
@login_required
def delete_tag(tag_id: str):
    get_services().tags.delete_tag(tag_id)
    return "", 204
