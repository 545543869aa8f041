"""
Survey API Backend: Feedback Route Handlers
==============================================

What:  POST /api/feedback (submit) and GET /api/feedback (list all).
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from survey_api.database import get_db_session
from survey_api.schemas.common import ErrorResponse
from survey_api.schemas.feedback import (
    FeedbackCreate,
    FeedbackCreatedResponse,
    FeedbackListResponse,
)
from survey_api.services.feedback_service import feedback_service

router = APIRouter(prefix="/api", tags=["Feedback"])


@router.post(
    "/feedback",
    status_code=201,
    response_model=FeedbackCreatedResponse,
    responses={400: {"description": "Missing required fields", "model": ErrorResponse}},
    summary="Submit feedback",
)
async def submit_feedback(
    payload: FeedbackCreate,
    db: AsyncSession = Depends(get_db_session),
) -> FeedbackCreatedResponse:
    feedback_id = await feedback_service.submit_feedback(db=db, payload=payload)
    return FeedbackCreatedResponse(feedback_id=feedback_id)


@router.get(
    "/feedback",
    response_model=FeedbackListResponse,
    summary="List all feedback",
)
async def list_feedback(db: AsyncSession = Depends(get_db_session)) -> FeedbackListResponse:
    feedbacks = await feedback_service.list_feedback(db=db)
    return FeedbackListResponse(feedbacks=feedbacks)
