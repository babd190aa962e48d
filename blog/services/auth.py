from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError

from blog.errors import AuthenticationError, DuplicateNameError
from blog.models.user import User
from blog.repositories.user import UserRepository
from blog.utils.crypto import hash_password, verify_password
from blog.utils.tokens import create_access_token, decode_token

log = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Incorrect email or password"


class AuthService:
    def __init__(
        self,
        users: UserRepository,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in: int = 86400,
    ) -> None:
        self.users = users
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_in = expires_in

    def authenticate(self, email: str, password: str) -> User:
        """
        Check credentials and return the matching user.
        Unknown emails and wrong passwords fail with the same message.
        """
        user = self.users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            log.info("login_failed", email=email)
            raise AuthenticationError(INVALID_CREDENTIALS)
        log.info("login_succeeded", user_id=user.hex_id)
        return user

    def generate_token(self, user: User) -> str:
        return create_access_token(
            user.hex_id,
            secret=self.secret_key,
            algorithm=self.algorithm,
            expires_in=self.expires_in,
        )

    def validate_token(self, token: str) -> User | None:
        payload = decode_token(token, secret=self.secret_key, algorithm=self.algorithm)
        if not payload or not payload.get("sub"):
            return None
        return self.users.get_by_hex_id(payload["sub"])

    def register_user(self, email: str, name: str, password: str) -> User:
        if self.users.get_by_email(email) is not None:
            raise DuplicateNameError(f"User already exists: {email}")
        user = User(email=email.strip().lower(), name=name, password_hash=hash_password(password))
        try:
            self.users.add(user)
            self.users.commit()
        except IntegrityError:
            self.users.rollback()
            raise DuplicateNameError(f"User already exists: {email}")
        log.info("user_registered", user_id=user.hex_id)
        return user
