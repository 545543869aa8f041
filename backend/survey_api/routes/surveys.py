"""
Survey API Backend: Survey Route Handlers
============================================

What:  POST/GET /api/surveys and GET/PUT /api/surveys/{id}.
How:   Extracts the path id and JSON body, delegates to SurveyService.

Why `survey_id: str` (not UUID):
    A UUID-typed parameter would fail in FastAPI's parser with a generic
    message. Taking the raw string lets SurveyService reject it as a
    ValidationError that names the id field.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from survey_api.database import get_db_session
from survey_api.schemas.common import ErrorResponse, MessageResponse
from survey_api.schemas.survey import CreatedResponse
from survey_api.services.survey_service import survey_service

router = APIRouter(prefix="/api", tags=["Surveys"])


@router.post(
    "/surveys",
    status_code=201,
    response_model=CreatedResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Create a survey",
    description="Stores the request body verbatim as a new survey document.",
)
async def create_survey(
    survey: Dict[str, Any] = Body(..., description="Arbitrary survey document"),
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    survey_id = await survey_service.create_survey(db=db, body=survey)
    return CreatedResponse(message="Survey created!", id=survey_id)


@router.get(
    "/surveys",
    response_model=List[Dict[str, Any]],
    summary="List all surveys",
)
async def list_surveys(db: AsyncSession = Depends(get_db_session)) -> List[Dict[str, Any]]:
    return await survey_service.list_surveys(db=db)


@router.get(
    "/surveys/{survey_id}",
    response_model=Dict[str, Any],
    responses={
        400: {"description": "Malformed survey id", "model": ErrorResponse},
        404: {"description": "Survey not found", "model": ErrorResponse},
    },
    summary="Get a survey by id",
)
async def get_survey(
    survey_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Dict[str, Any]:
    return await survey_service.get_survey(db=db, survey_id=survey_id)


@router.put(
    "/surveys/{survey_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Malformed survey id or empty body", "model": ErrorResponse},
        404: {"description": "Survey not found", "model": ErrorResponse},
    },
    summary="Update a survey",
    description="Merges the body's fields into the stored survey; other fields are kept.",
)
async def update_survey(
    survey_id: str,
    survey: Dict[str, Any] = Body(..., description="Fields to set"),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await survey_service.update_survey(db=db, survey_id=survey_id, body=survey)
    return MessageResponse(message="Survey updated successfully!")
