"""
User Repository - Credential Store

users.json holds a single object mapping email -> user record.

Author: Fish Parque
Date: 2026-10-19
"""
import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from storefront.domain.user import User
from storefront.repositories.json_store import JsonDocumentStore

logger = logging.getLogger(__name__)


class UserRepository:
    """
    Repository for registered users

    Lookup is by exact (case-sensitive) email. Users are only ever inserted;
    there is no update or delete.
    """

    def __init__(self, store: JsonDocumentStore):
        self.store = store

    @staticmethod
    def _to_user(email: str, record) -> Optional[User]:
        try:
            return User.model_validate(record)
        except PydanticValidationError as e:
            logger.warning(f"Skipping malformed user record for {email}: {e.error_count()} errors")
            return None

    def lookup(self, email: str) -> Optional[User]:
        """
        Find a user by email

        Returns:
            User or None if not registered
        """
        record = self.store.snapshot().get(email)
        if record is None:
            return None
        return self._to_user(email, record)

    def insert_if_absent(self, user: User) -> bool:
        """
        Insert a user unless the email is already registered

        Returns:
            True if inserted, False if the email already exists
        """
        with self.store.lock:
            users = self.store.read()
            if user.email in users:
                return False

            users[user.email] = user.to_record()
            self.store.write(users)
            return True

    def find_all(self) -> List[User]:
        """All registered users, in document order"""
        users = []
        for email, record in self.store.snapshot().items():
            user = self._to_user(email, record)
            if user is not None:
                users.append(user)
        return users

    def count(self) -> int:
        return len(self.store.snapshot())
