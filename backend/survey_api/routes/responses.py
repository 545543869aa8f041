"""
Survey API Backend: Survey Response Route Handlers
=====================================================

What:  POST /api/survey-responses
       GET  /api/survey-responses/{surveyId}       (all responses for a survey)
       GET  /api/survey-responses/response/{id}    (one response)

Route order:
    `/response/{id}` is a two-segment path and `/{surveyId}` a one-segment
    path, so they never shadow each other regardless of declaration order.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from survey_api.database import get_db_session
from survey_api.schemas.common import ErrorResponse
from survey_api.schemas.survey import (
    CreatedResponse,
    SurveyResponseCreate,
    SurveyResponseDocument,
)
from survey_api.services.response_service import response_service

router = APIRouter(prefix="/api/survey-responses", tags=["Survey Responses"])


@router.post(
    "",
    status_code=201,
    response_model=CreatedResponse,
    summary="Submit a survey response",
    description="surveyId is not checked; responses may reference any survey id.",
)
async def submit_response(
    payload: SurveyResponseCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    response_id = await response_service.submit_response(
        db=db,
        survey_id=payload.survey_id,
        answers=payload.answers,
    )
    return CreatedResponse(message="Survey response submitted!", id=response_id)


@router.get(
    "/response/{response_id}",
    response_model=SurveyResponseDocument,
    responses={
        400: {"description": "Malformed response id", "model": ErrorResponse},
        404: {"description": "Survey response not found", "model": ErrorResponse},
    },
    summary="Get one survey response",
)
async def get_response(
    response_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> SurveyResponseDocument:
    return await response_service.get_response(db=db, response_id=response_id)


@router.get(
    "/{survey_id}",
    response_model=List[SurveyResponseDocument],
    summary="List responses for a survey",
)
async def list_responses_for_survey(
    survey_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[SurveyResponseDocument]:
    return await response_service.list_responses_for_survey(db=db, survey_id=survey_id)
