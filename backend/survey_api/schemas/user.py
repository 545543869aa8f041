"""
Survey API Backend: User Schemas
===================================

What:  Request and response contracts for the users and providers routes.

Why every request field is Optional:
    Missing required fields must answer 400 with a message naming the
    required set (not a parser error list), so presence checks live in
    UserService and the schemas only fix the types.

Security:
    UserDocument has no password field. Stored hashes never leave the server,
    not even in a successful login.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field

from survey_api.schemas.common import DocumentModel


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class UserCreate(BaseModel):
    """Body of POST /api/users/register, /api/users/create and /api/users."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    profile_img: Optional[str] = Field(default=None, alias="profileImg")
    god_access: Optional[bool] = None

    model_config = {"populate_by_name": True}


class LoginRequest(BaseModel):
    """Body of POST /api/users/login and /api/providers/login."""
    email: Optional[str] = None
    password: Optional[str] = None


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class UserDocument(DocumentModel):
    """Public view of a user record."""
    id: uuid.UUID = Field(alias="_id")
    name: str
    email: str
    profile_img: Optional[str] = Field(default=None, alias="profileImg")
    god_access: bool = False


class UserLookupResponse(BaseModel):
    """
    GET /api/users?email=...

    `data` is only present when `exists` is true; the route drops unset
    fields so the absent case is exactly {"exists": false}.
    """
    exists: bool
    data: Optional[UserDocument] = None


class UserCreatedResponse(BaseModel):
    success: bool = True
    message: str
    user_id: uuid.UUID = Field(alias="userId")

    model_config = {"populate_by_name": True}


class LoginResponse(BaseModel):
    success: bool = True
    user: UserDocument


class ProviderLoginResponse(BaseModel):
    success: bool = True
    message: str = "Provider login successful!"
    provider: UserDocument
