from __future__ import annotations

from flask import Blueprint

bp = Blueprint("api", __name__, url_prefix="/api/v1")

# Register resource routes on the blueprint
import blog.blueprints.resources.auth  # noqa: E402,F401
import blog.blueprints.resources.categories  # noqa: E402,F401
import blog.blueprints.resources.posts  # noqa: E402,F401
import blog.blueprints.resources.tags  # noqa: E402,F401
