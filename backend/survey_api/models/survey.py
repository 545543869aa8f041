"""
Survey API Backend: Survey and SurveyResponse Models
=======================================================

What:  ORM models for the `surveys` and `survey_responses` collections.
Why:   Surveys are free-form documents; the client decides every field.
       Responses reference a survey by a loose string id and carry
       arbitrary answers.
How:   Document content lives in a JSON column (JSONB on PostgreSQL); only
       the identifier and timestamps are real columns.

Collection Design:
    surveys
        id          UUID, generated server-side
        data        the client's survey document, stored verbatim
        created_at  / updated_at for housekeeping (not part of the document)

    survey_responses
        id            UUID
        survey_id     string reference to a survey; NOT a foreign key, a
                      response may point at a survey that never existed
        answers       arbitrary JSON
        submitted_at  server-assigned submission time

    Responses are immutable once written: the API has no update or delete.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from survey_api.database import Base, DocumentJSON


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Survey(Base):
    """A survey document, identified by a generated UUID."""

    __tablename__ = "surveys"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # The whole client document; never inspected by the server
    data: Mapped[Dict[str, Any]] = mapped_column(
        DocumentJSON,
        nullable=False,
        default=dict,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    def to_document(self) -> Dict[str, Any]:
        """
        Flatten into the shape clients expect: the stored fields plus `_id`.

        `_id` is written last so a stored field can never shadow it.
        """
        document = dict(self.data or {})
        document["_id"] = str(self.id)
        return document

    def __repr__(self) -> str:
        return f"<Survey(id={self.id}, fields={len(self.data or {})})>"


class SurveyResponse(Base):
    """One submitted set of answers for a survey."""

    __tablename__ = "survey_responses"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # Loose reference; matched by exact string comparison
    survey_id: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    answers: Mapped[Any] = mapped_column(
        DocumentJSON,
        nullable=True,
    )

    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    # Listing responses for one survey is the only filtered query
    __table_args__ = (
        Index("idx_survey_responses_survey_id", survey_id),
    )

    def __repr__(self) -> str:
        return f"<SurveyResponse(id={self.id}, survey_id='{self.survey_id}')>"
