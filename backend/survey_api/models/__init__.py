# Models package init
"""
Survey API Backend: ORM Models
================================

Importing this package registers every collection with Base.metadata,
which Alembic and create_tables() rely on.
"""

from survey_api.models.feedback import Feedback
from survey_api.models.survey import Survey, SurveyResponse
from survey_api.models.user import User

__all__ = ["Feedback", "Survey", "SurveyResponse", "User"]
