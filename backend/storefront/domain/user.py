"""
User Domain Models

Represents registered customers as stored in users.json, plus the
sanitized projections returned by the API.

Author: Fish Parque
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict


class UserProfile(BaseModel):
    """Sanitized user projection returned on login (never includes the hash)"""

    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email (unique key)")
    phone: str = Field(..., description="Customer phone")
    address: str = Field(..., description="Delivery address")

    model_config = ConfigDict(populate_by_name=True)


class AdminUserView(UserProfile):
    """User projection for the admin listing"""

    created_at: str = Field(..., alias="createdAt", description="Registration timestamp (ISO-8601)")


class User(BaseModel):
    """
    User domain model - a registered customer

    Fields:
        name: Customer name
        email: Unique, case-sensitive key
        password_hash: Hex SHA-256 digest (stored under "password")
        phone: Customer phone
        address: Delivery address
        created_at: Registration timestamp (stored under "createdAt")
    """

    name: str
    email: str
    password_hash: str = Field(..., alias="password")
    phone: str
    address: str
    created_at: str = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_record(self) -> dict:
        """Convert to the users.json record shape"""
        return self.model_dump(by_alias=True)

    def to_profile(self) -> UserProfile:
        return UserProfile(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address,
        )

    def to_admin_view(self) -> AdminUserView:
        return AdminUserView(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            created_at=self.created_at,
        )
