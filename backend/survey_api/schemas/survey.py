"""
Survey API Backend: Survey & Survey Response Schemas
======================================================

What:  API contracts for the surveys and survey-responses routes.

Survey documents themselves have no schema: request and response bodies
are plain JSON objects (Dict[str, Any]). Only the creation acknowledgement
and the response documents get models.
"""

import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from survey_api.schemas.common import DocumentModel


class CreatedResponse(BaseModel):
    """Returned with HTTP 201 after a survey or a survey response is stored."""
    message: str = Field(description="Human-readable success message")
    id: uuid.UUID = Field(description="Generated document identifier")


class SurveyResponseCreate(BaseModel):
    """
    Body of POST /api/survey-responses.

    surveyId is not checked against the surveys collection; any string is
    accepted, including the id of a survey that does not exist.
    """
    survey_id: Optional[str] = Field(default=None, alias="surveyId")
    answers: Any = Field(default=None, description="Arbitrary answer structure")

    model_config = {"populate_by_name": True}


class SurveyResponseDocument(DocumentModel):
    """A stored survey response as returned to clients."""
    id: uuid.UUID = Field(alias="_id")
    survey_id: Optional[str] = Field(default=None, alias="surveyId")
    answers: Any = None
    submitted_at: datetime = Field(alias="submittedAt")
