"""
Survey API Backend: User & Provider Route Handlers
=====================================================

What:  Account lookup, registration and login.

Route Inventory:
    GET  /api/users?email=         lookup: {exists, data?}
    POST /api/users/register       create account (profileImg optional)
    POST /api/users/create         create account (profileImg required)
    POST /api/users                alias of /api/users/create
    POST /api/users/login          user login
    POST /api/providers/login      provider login (same records, own messages)

All three creation routes go through UserService.create_user and hash the
password; they differ only in whether profileImg is required and in the
success message.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from survey_api.database import get_db_session
from survey_api.schemas.common import ErrorResponse
from survey_api.schemas.user import (
    LoginRequest,
    LoginResponse,
    ProviderLoginResponse,
    UserCreate,
    UserCreatedResponse,
    UserLookupResponse,
)
from survey_api.services.user_service import UserService, get_user_service

router = APIRouter(prefix="/api", tags=["Users"])

_create_responses = {
    201: {"description": "Account created", "model": UserCreatedResponse},
    400: {"description": "Missing field or duplicate email", "model": ErrorResponse},
}
_login_responses = {
    401: {"description": "Unknown email or wrong password", "model": ErrorResponse},
}


@router.get(
    "/users",
    response_model=UserLookupResponse,
    response_model_exclude_unset=True,
    summary="Check whether an account exists for an email",
)
async def lookup_user(
    email: Optional[str] = Query(default=None, description="Email to look up"),
    db: AsyncSession = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> UserLookupResponse:
    return await service.lookup_user_by_email(db=db, email=email)


@router.post(
    "/users/login",
    response_model=LoginResponse,
    responses=_login_responses,
    summary="Log in a user",
)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> LoginResponse:
    user = await service.login(db=db, email=credentials.email, password=credentials.password)
    return LoginResponse(user=user)


@router.post(
    "/users/register",
    status_code=201,
    response_model=UserCreatedResponse,
    responses=_create_responses,
    summary="Register a user",
)
async def register(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> UserCreatedResponse:
    user_id = await service.create_user(db=db, payload=payload)
    return UserCreatedResponse(message="User registered successfully!", user_id=user_id)


@router.post(
    "/users/create",
    status_code=201,
    response_model=UserCreatedResponse,
    responses=_create_responses,
    summary="Create a user with a profile image",
)
@router.post(
    "/users",
    status_code=201,
    response_model=UserCreatedResponse,
    responses=_create_responses,
    include_in_schema=False,
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> UserCreatedResponse:
    user_id = await service.create_user(db=db, payload=payload, require_profile_img=True)
    return UserCreatedResponse(message="User created successfully!", user_id=user_id)


@router.post(
    "/providers/login",
    response_model=ProviderLoginResponse,
    responses=_login_responses,
    summary="Log in a provider",
)
async def provider_login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> ProviderLoginResponse:
    provider = await service.provider_login(
        db=db,
        email=credentials.email,
        password=credentials.password,
    )
    return ProviderLoginResponse(provider=provider)
