"""
Survey API Backend: Feedback Service
=======================================

What:  Store and list user feedback. No update or delete.
"""

import logging
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from survey_api.exceptions import DatabaseError
from survey_api.models.feedback import Feedback
from survey_api.schemas.feedback import FeedbackCreate, FeedbackDocument
from survey_api.services.validation import require_fields

logger = logging.getLogger(__name__)


class FeedbackService:

    async def submit_feedback(self, db: AsyncSession, payload: FeedbackCreate) -> uuid.UUID:
        """
        Store one feedback entry with a server-assigned `submittedAt`.

        technical_issue defaults to false and profileImg to null.

        Raises:
            ValidationError: username, email, rating or topic missing (→ 400)
        """
        require_fields(
            payload.model_dump(),
            ("username", "email", "rating", "topic"),
            "Missing required fields (username, email, rating, topic).",
        )

        feedback = Feedback(
            username=payload.username,
            email=payload.email,
            rating=payload.rating,
            topic=payload.topic,
            technical_issue=bool(payload.technical_issue),
            profile_img=payload.profile_img or None,
        )
        try:
            db.add(feedback)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error submitting feedback: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to submit feedback.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Feedback %s submitted (topic=%s)", feedback.id, feedback.topic)
        return feedback.id

    async def list_feedback(self, db: AsyncSession) -> List[FeedbackDocument]:
        try:
            result = await db.execute(select(Feedback))
            feedbacks = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error fetching feedbacks: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch feedbacks.",
                context={"error_type": type(e).__name__},
            )

        return [
            FeedbackDocument(
                id=f.id,
                username=f.username,
                email=f.email,
                rating=f.rating,
                topic=f.topic,
                technical_issue=f.technical_issue,
                profile_img=f.profile_img,
                submitted_at=f.submitted_at,
            )
            for f in feedbacks
        ]


# ── Singleton Instance ────────────────────────────────────────────────────
feedback_service = FeedbackService()
