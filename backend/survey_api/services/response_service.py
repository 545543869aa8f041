"""
Survey API Backend: Survey Response Service
==============================================

What:  Submit and read answers to surveys.
How:   Responses are write-once. `survey_id` is matched by exact string
       comparison and is never checked against the surveys collection, so a
       response can be submitted for a survey that does not exist.
"""

import logging
import uuid
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from survey_api.exceptions import DatabaseError, NotFoundError
from survey_api.models.survey import SurveyResponse
from survey_api.schemas.survey import SurveyResponseDocument
from survey_api.services.validation import parse_document_id

logger = logging.getLogger(__name__)


def _to_document(response: SurveyResponse) -> SurveyResponseDocument:
    return SurveyResponseDocument(
        id=response.id,
        survey_id=response.survey_id,
        answers=response.answers,
        submitted_at=response.submitted_at,
    )


class ResponseService:
    """Business logic layer for survey responses."""

    async def submit_response(
        self,
        db: AsyncSession,
        survey_id: Optional[str],
        answers: Any,
    ) -> uuid.UUID:
        """Store one response with a server-assigned submission time."""
        try:
            response = SurveyResponse(survey_id=survey_id, answers=answers)
            db.add(response)
            await db.flush()
            logger.info("Response %s submitted for survey %s", response.id, survey_id)
            return response.id
        except SQLAlchemyError as e:
            logger.error("Database error submitting survey response: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to submit response",
                context={"survey_id": survey_id},
            )

    async def list_responses_for_survey(
        self,
        db: AsyncSession,
        survey_id: str,
    ) -> List[SurveyResponseDocument]:
        try:
            result = await db.execute(
                select(SurveyResponse).where(SurveyResponse.survey_id == survey_id)
            )
            return [_to_document(r) for r in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error fetching responses for %s: %s", survey_id, str(e))
            raise DatabaseError(
                message="Failed to fetch survey responses",
                context={"survey_id": survey_id},
            )

    async def get_response(self, db: AsyncSession, response_id: str) -> SurveyResponseDocument:
        """
        Fetch one response by its own id.

        Raises:
            ValidationError: malformed id (→ 400)
            NotFoundError: no response has that id (→ 404)
        """
        rid = parse_document_id(response_id, "survey response")
        try:
            result = await db.execute(select(SurveyResponse).where(SurveyResponse.id == rid))
            response = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching survey response %s: %s", response_id, str(e))
            raise DatabaseError(
                message="Failed to fetch survey response",
                context={"response_id": response_id},
            )

        if response is None:
            raise NotFoundError(resource="survey response", resource_id=response_id)
        return _to_document(response)


# ── Singleton Instance ────────────────────────────────────────────────────
response_service = ResponseService()
