from __future__ import annotations

from flask import jsonify

from blog.blueprints.api import bp
from blog.decorators import validated_body
from blog.extensions import limiter
from blog.schemas.auth import AuthResponse, LoginRequest
from blog.services import get_services


@bp.post("/auth")
@limiter.limit("5 per minute")
@validated_body(LoginRequest)
def login(payload: LoginRequest):
    """Exchange email and password for a bearer token"""
    auth = get_services().auth
    user = auth.authenticate(payload.email, payload.password)
    response = AuthResponse(token=auth.generate_token(user), expires_in=auth.expires_in)
    return jsonify(response.model_dump())
