"""
Survey API Backend: Feedback Model
=====================================

What:  ORM model for the `feedbacks` collection.
How:   Create and list only; rows are never updated.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import Boolean, DateTime, String, Text, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from survey_api.database import Base, DocumentJSON


class Feedback(Base):
    """A piece of user feedback about the application."""

    __tablename__ = "feedbacks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    rating: Mapped[Any] = mapped_column(DocumentJSON, nullable=False)
    topic: Mapped[str] = mapped_column(Text, nullable=False)
    technical_issue: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
    profile_img: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Feedback(id={self.id}, topic='{self.topic}', rating={self.rating})>"
