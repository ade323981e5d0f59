"""
Storefront error taxonomy

Every user-facing failure is a StorefrontError carrying the message shown
to the client. The API layer renders them as {"success": false, "message"}
result payloads instead of letting them abort the request.

Author: Fish Parque
Date: 2026-10-19
"""
from fastapi import status


class StorefrontError(Exception):
    """Base class for failures that are reported back to the client"""

    status_code: int = status.HTTP_200_OK
    default_message: str = "Something went wrong. Please try again."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StorefrontError):
    """Missing or invalid input fields"""
    default_message = "All fields are required"


class DuplicateEmailError(StorefrontError):
    """Registration with an email that is already taken"""
    default_message = "Email already registered"


class InvalidCredentialsError(StorefrontError):
    """Login failure; same message for unknown email and wrong password"""
    default_message = "Invalid email or password"


class InvalidOrderError(StorefrontError):
    """Order without a customer email or without line items"""
    default_message = "Invalid order data"


class UnauthorizedError(StorefrontError):
    """Admin shared secret missing or wrong"""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized"


class StorageError(StorefrontError):
    """A JSON document or the backup log could not be written"""
    default_message = "Storage failure. Please try again."


class NotificationError(StorefrontError):
    """Outbound order notification failed (logged, never surfaced)"""
    default_message = "Order notification failed"
