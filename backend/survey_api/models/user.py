"""
Survey API Backend: User Model
=================================

What:  ORM model for the `users` collection.
Why:   Accounts for survey authors and providers; both log in against the
       same records.
How:   Plain columns. `email` carries a UNIQUE constraint so two concurrent
       registrations with the same address cannot both be stored; the
       service still checks first to give a friendly message.

Credential policy:
    `password` always holds a bcrypt hash. No route stores plaintext.
"""

import uuid
from typing import Optional

from sqlalchemy import Boolean, String, UniqueConstraint, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from survey_api.database import Base


class User(Base):
    """A user (or provider) account keyed by email."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)

    # bcrypt hash, never serialized
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    profile_img: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    # Privilege flag; nothing in this service enforces it
    god_access: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
