from __future__ import annotations

from functools import wraps
from typing import Callable, Any

from flask import request
from pydantic import BaseModel

from blog.errors import RequestValidationError
from blog.utils.validation import validate_payload


def validated_body(model: type[BaseModel]) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Validate the JSON body against ``model`` and pass it to the view as ``payload``."""

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            result = validate_payload(model, request.get_json(silent=True))
            if not result.ok:
                raise RequestValidationError(result.errors)
            return fn(*args, payload=result.value, **kwargs)

        return wrapper

    return decorator
