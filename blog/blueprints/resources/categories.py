from __future__ import annotations

from flask import jsonify
from flask_login import login_required

from blog.blueprints.api import bp
from blog.decorators import validated_body
from blog.extensions import limiter
from blog.mappers import category_to_dto, create_request_to_category
from blog.schemas.categories import CreateCategoryRequest
from blog.services import get_services


@bp.get("/categories")
def list_categories():
    """List all categories with their published post counts"""
    categories = get_services().categories.list_categories()
    return jsonify([category_to_dto(c).model_dump(mode="json") for c in categories])


@bp.post("/categories")
@limiter.limit("10 per minute")
@login_required
@validated_body(CreateCategoryRequest)
def create_category(payload: CreateCategoryRequest):
    category_to_create = create_request_to_category(payload)
    saved = get_services().categories.create_category(category_to_create)
    return jsonify(category_to_dto(saved).model_dump(mode="json")), 201


@bp.delete("/categories/<string:category_id>")
@limiter.limit("10 per minute")
@login_required
def delete_category(category_id: str):
    get_services().categories.delete_category(category_id)
    return "", 204
