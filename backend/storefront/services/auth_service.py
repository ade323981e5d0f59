"""
Auth Service
Customer registration and login against the Credential Store

Author: Fish Parque
Date: 2026-10-19
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional

from storefront.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    ValidationError,
)
from storefront.core.security import generate_token, hash_password, verify_password
from storefront.domain.user import AdminUserView, User, UserProfile
from storefront.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

REGISTRATION_SUCCESS_MESSAGE = "Registration successful! Please login."
LOGIN_SUCCESS_MESSAGE = "Login successful!"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


@dataclass
class LoginResult:
    """Successful login: sanitized user plus an advisory session token"""
    message: str
    user: UserProfile
    token: str


class AuthService:
    """
    Service for customer accounts

    Handles:
    - Registration (insert-if-absent keyed by email)
    - Login (digest check, session token issue)
    - Admin user listing

    Session tokens are not recorded; no endpoint validates them.
    """

    def __init__(self, users: UserRepository, clock: Callable[[], datetime] = _utc_now):
        self.users = users
        self.clock = clock

    def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        phone: Optional[str],
        address: Optional[str],
    ) -> str:
        """
        Register a new customer

        Returns:
            Confirmation message

        Raises:
            ValidationError: a field is missing or blank
            DuplicateEmailError: email already registered
            StorageError: users.json could not be written
        """
        if any(_is_blank(value) for value in (name, email, password, phone, address)):
            raise ValidationError("All fields are required")

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            phone=phone,
            address=address,
            created_at=self.clock().isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )

        if not self.users.insert_if_absent(user):
            raise DuplicateEmailError("Email already registered")

        logger.info(f"Registered user {email}")
        return REGISTRATION_SUCCESS_MESSAGE

    def login(self, email: Optional[str], password: Optional[str]) -> LoginResult:
        """
        Verify credentials and issue a session token

        Unknown email and wrong password raise the same error.

        Raises:
            InvalidCredentialsError: unknown email or wrong password
        """
        user = self.users.lookup(email) if not _is_blank(email) else None

        if user is None or password is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError("Invalid email or password")

        return LoginResult(
            message=LOGIN_SUCCESS_MESSAGE,
            user=user.to_profile(),
            token=generate_token(),
        )

    def list_users(self) -> List[AdminUserView]:
        """All registered users without password hashes"""
        return [user.to_admin_view() for user in self.users.find_all()]

