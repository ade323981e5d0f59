"""
Authentication API endpoints
- Customer registration
- Customer login
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict

from storefront.core.context import AppContext, get_context
from storefront.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    ValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Pydantic Models
# =============================================================================

# Fields are optional so a missing one is reported as "All fields are
# required" rather than a 422. Numbers are accepted as strings (a phone
# number sent as 8012345678).
class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/register")
def register(payload: RegisterRequest, context: AppContext = Depends(get_context)):
    """Register a new customer"""
    try:
        message = context.auth_service.register(
            name=payload.name,
            email=payload.email,
            password=payload.password,
            phone=payload.phone,
            address=payload.address,
        )
    except (ValidationError, DuplicateEmailError):
        raise
    except Exception:
        logger.exception("Registration error")
        return {"success": False, "message": "Registration failed. Please try again."}

    return {"success": True, "message": message}


@router.post("/login")
def login(payload: LoginRequest, context: AppContext = Depends(get_context)):
    """
    Log a customer in

    Returns the sanitized user and an opaque token. The token is not
    checked by any other endpoint.
    """
    try:
        result = context.auth_service.login(payload.email, payload.password)
    except InvalidCredentialsError:
        raise
    except Exception:
        logger.exception("Login error")
        return {"success": False, "message": "Login failed. Please try again."}

    return {
        "success": True,
        "message": result.message,
        "user": result.user.model_dump(),
        "token": result.token,
    }
