"""
Survey API Backend: Survey Service
=====================================

What:  Create, list, fetch and update survey documents.
Why:   Keeps persistence and error translation out of the route handlers.
How:   Each method is one round trip on the session the route injects.
Who:   Called by the /api/surveys route handlers.

Document semantics:
    A survey is whatever JSON object the client sent. The server adds only
    `_id` on the way out and never inspects the content. Updates merge the
    supplied fields into the stored document (fields not mentioned are kept).

Error Handling Strategy:
    Malformed id      → ValidationError (400) before touching the database
    No such survey    → NotFoundError (404)
    SQLAlchemy error  → DatabaseError (500, generic message, details logged)
"""

import logging
import uuid
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from survey_api.exceptions import DatabaseError, NotFoundError, ValidationError
from survey_api.models.survey import Survey
from survey_api.services.validation import parse_document_id

logger = logging.getLogger(__name__)


def _client_fields(body: Dict[str, Any]) -> Dict[str, Any]:
    # `_id` is server-owned; a client copy is dropped rather than stored
    return {key: value for key, value in body.items() if key != "_id"}


class SurveyService:
    """
    Business logic layer for survey documents.

    Stateless: the session is passed into every call.
    """

    async def create_survey(self, db: AsyncSession, body: Dict[str, Any]) -> uuid.UUID:
        """
        Store `body` verbatim as a new survey.

        Returns:
            The generated survey id.
        """
        try:
            survey = Survey(data=_client_fields(body))
            db.add(survey)
            await db.flush()  # Assigns the id and surfaces insert errors here
            logger.info("Survey created: %s", survey.id)
            return survey.id
        except SQLAlchemyError as e:
            logger.error("Database error creating survey: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create survey",
                context={"error_type": type(e).__name__},
            )

    async def list_surveys(self, db: AsyncSession) -> List[Dict[str, Any]]:
        """All surveys in natural storage order (no ORDER BY)."""
        try:
            result = await db.execute(select(Survey))
            return [survey.to_document() for survey in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing surveys: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch surveys",
                context={"error_type": type(e).__name__},
            )

    async def _find(self, db: AsyncSession, survey_id: str) -> Survey:
        sid = parse_document_id(survey_id, "survey")
        try:
            result = await db.execute(select(Survey).where(Survey.id == sid))
            survey = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching survey %s: %s", survey_id, str(e))
            raise DatabaseError(
                message="Failed to fetch survey by ID",
                context={"survey_id": survey_id},
            )
        if survey is None:
            raise NotFoundError(resource="survey", resource_id=survey_id)
        return survey

    async def get_survey(self, db: AsyncSession, survey_id: str) -> Dict[str, Any]:
        """
        Fetch one survey document.

        Raises:
            ValidationError: `survey_id` is not a well-formed id (→ 400)
            NotFoundError: no survey has that id (→ 404)
            DatabaseError: query failed (→ 500)
        """
        survey = await self._find(db, survey_id)
        return survey.to_document()

    async def update_survey(
        self,
        db: AsyncSession,
        survey_id: str,
        body: Dict[str, Any],
    ) -> None:
        """
        Merge `body` into an existing survey.

        Behaves like a field-level `$set`: supplied keys replace stored keys,
        other stored keys stay. An empty body is rejected because there is
        nothing to set.

        Raises:
            ValidationError: malformed id or empty body (→ 400)
            NotFoundError: no survey matched (→ 404)
            DatabaseError: update failed (→ 500)
        """
        fields = _client_fields(body)
        if not fields:
            raise ValidationError(message="Update body must contain at least one field.")

        survey = await self._find(db, survey_id)
        try:
            # Reassign (not mutate) so SQLAlchemy sees the JSON column change
            survey.data = {**(survey.data or {}), **fields}
            await db.flush()
            logger.info("Survey %s updated: %d field(s)", survey.id, len(fields))
        except SQLAlchemyError as e:
            logger.error("Database error updating survey %s: %s", survey_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to update survey",
                context={"survey_id": survey_id},
            )


# ── Singleton Instance ────────────────────────────────────────────────────
survey_service = SurveyService()
