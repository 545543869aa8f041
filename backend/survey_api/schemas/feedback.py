"""
Survey API Backend: Feedback Schemas
=======================================

What:  Request and response contracts for /api/feedback.
"""

import uuid
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from survey_api.schemas.common import DocumentModel


class FeedbackCreate(BaseModel):
    """
    Body of POST /api/feedback.

    username, email, rating and topic are required; FeedbackService checks
    their presence so the client gets one 400 listing all four.
    rating is stored as sent: a number, or a label such as "5 stars".
    """
    username: Optional[str] = None
    email: Optional[str] = None
    rating: Any = None
    topic: Optional[str] = None
    technical_issue: Optional[bool] = None
    profile_img: Optional[str] = Field(default=None, alias="profileImg")

    model_config = {"populate_by_name": True}


class FeedbackDocument(DocumentModel):
    id: uuid.UUID = Field(alias="_id")
    username: str
    email: str
    rating: Any
    topic: str
    technical_issue: bool = False
    profile_img: Optional[str] = Field(default=None, alias="profileImg")
    submitted_at: datetime = Field(alias="submittedAt")


class FeedbackCreatedResponse(BaseModel):
    success: bool = True
    message: str = "Feedback submitted successfully!"
    feedback_id: uuid.UUID = Field(alias="feedbackId")

    model_config = {"populate_by_name": True}


class FeedbackListResponse(BaseModel):
    success: bool = True
    feedbacks: List[FeedbackDocument] = Field(default_factory=list)
