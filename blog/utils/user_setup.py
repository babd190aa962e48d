from __future__ import annotations

from typing import Optional

from flask import current_app
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from blog.extensions import db
from blog.repositories.user import UserRepository


def ensure_user_exists() -> Optional[str]:
    """
    Check whether any author account exists in the database.

    Authors are created with the 'flask create-user' CLI command. A failing
    check is logged and does not prevent app startup.

    Returns:
        Status message if no user exists, None if one exists or on error
    """
    try:
        # Skip check if the users table doesn't exist yet (e.g., before migrations)
        if not inspect(db.engine).has_table("users"):
            current_app.logger.info("Users table not found yet; skipping user check")
            return None

        if UserRepository(db.session).count() > 0:
            return None

        current_app.logger.warning("No user exists. Create one using: flask create-user")
        return "No user found. Use 'flask create-user' to create one."

    except SQLAlchemyError as e:
        current_app.logger.error(f"Error checking for users: {str(e)}")
        current_app.logger.info("Continuing application startup without user check")
        return None
