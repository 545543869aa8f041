"""
Survey API Backend: User Service
===================================

What:  Account lookup, creation and credential checks for users and providers.
Why:   Every account goes through one creation path with one hashing policy,
       whichever route the client called.
How:   Passwords are hashed with bcrypt (passlib) before storage; login
       verifies against the hash and never returns it.
Who:   Called by the /api/users and /api/providers route handlers.

Duplicate emails:
    The service checks for an existing account first so the common case
    gets a clear 400. Two registrations racing past that check are stopped
    by the UNIQUE constraint on users.email; the resulting IntegrityError is
    translated into the same 400.

Login flow (users and providers):
    1. Fetch the account by email     → 401 if absent
    2. Verify password against hash   → 401 on mismatch
    3. Return the public user document (no password field)
"""

import logging
import uuid
from typing import Optional

from fastapi import Request
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from survey_api.exceptions import DatabaseError, UnauthorizedError, ValidationError
from survey_api.models.user import User
from survey_api.schemas.user import UserCreate, UserDocument, UserLookupResponse
from survey_api.security import get_password_hash, verify_password
from survey_api.services.validation import is_blank, require_fields

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists."


def to_user_document(user: User) -> UserDocument:
    return UserDocument(
        id=user.id,
        name=user.name,
        email=user.email,
        profile_img=user.profile_img,
        god_access=user.god_access,
    )


class UserService:
    """
    Business logic layer for user accounts.

    Args:
        pwd_context: passlib context used for hashing and verification.
                     create_app builds one from its settings' bcrypt_rounds.
    """

    def __init__(self, pwd_context: CryptContext):
        self.pwd_context = pwd_context

    async def _find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        try:
            result = await db.execute(select(User).where(User.email == email))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error looking up user by email: %s", str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})

    async def lookup_user_by_email(
        self,
        db: AsyncSession,
        email: Optional[str],
    ) -> UserLookupResponse:
        """
        Report whether an account exists for `email`.

        Returns {"exists": false} (no `data` key) when absent and
        {"exists": true, "data": user} when present.
        """
        if is_blank(email):
            return UserLookupResponse(exists=False)

        user = await self._find_by_email(db, email)
        if user is None:
            return UserLookupResponse(exists=False)
        return UserLookupResponse(exists=True, data=to_user_document(user))

    async def create_user(
        self,
        db: AsyncSession,
        payload: UserCreate,
        require_profile_img: bool = False,
    ) -> uuid.UUID:
        """
        Create an account with a hashed password.

        Args:
            db: Async database session
            payload: Registration fields; profileImg and god_access are optional
            require_profile_img: The /api/users/create contract also demands
                                 a profile image

        Returns:
            The new user's id.

        Raises:
            ValidationError: missing required field or duplicate email (→ 400)
            DatabaseError: insert failed for any other reason (→ 500)
        """
        if require_profile_img:
            require_fields(
                payload.model_dump(),
                ("name", "email", "password", "profile_img"),
                "All fields (name, email, password, profileImg) are required.",
            )
        else:
            require_fields(
                payload.model_dump(),
                ("name", "email", "password"),
                "All fields (name, email, password) are required.",
            )

        if await self._find_by_email(db, payload.email) is not None:
            raise ValidationError(message=DUPLICATE_EMAIL_MESSAGE, field="email")

        user = User(
            name=payload.name,
            email=payload.email,
            password=get_password_hash(self.pwd_context, payload.password),
            profile_img=payload.profile_img or None,
            god_access=bool(payload.god_access),
        )
        try:
            db.add(user)
            await db.flush()
        except IntegrityError:
            # Lost the race against a concurrent registration of the same email
            logger.warning("Duplicate email rejected by unique constraint")
            raise ValidationError(message=DUPLICATE_EMAIL_MESSAGE, field="email")
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create user.",
                context={"error_type": type(e).__name__},
            )

        logger.info("User created: %s", user.id)
        return user.id

    async def _authenticate(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str],
        not_found_message: str,
    ) -> UserDocument:
        user = None if is_blank(email) else await self._find_by_email(db, email)
        if user is None:
            raise UnauthorizedError(message=not_found_message)

        if not verify_password(self.pwd_context, password or "", user.password):
            raise UnauthorizedError(message="Invalid credentials.")

        return to_user_document(user)

    async def login(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str],
    ) -> UserDocument:
        """
        Check user credentials.

        Raises:
            UnauthorizedError: unknown email or wrong password (→ 401)
        """
        return await self._authenticate(db, email, password, "Invalid credentials.")

    async def provider_login(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str],
    ) -> UserDocument:
        """Same as login(), with a provider-specific message for unknown emails."""
        return await self._authenticate(db, email, password, "Provider not found.")


def get_user_service(request: Request) -> UserService:
    """FastAPI dependency: the UserService owned by the app serving this request."""
    return request.app.state.user_service
