"""
Survey API Backend: Survey Service Unit Tests
================================================

What:  Tests for SurveyService (create, list, get, update) against a mocked session.
How:   No real database: the session's execute/flush are AsyncMocks.

What we test:
    ✅ Body stored verbatim, client `_id` dropped
    ✅ Malformed id rejected before any query
    ✅ Missing survey raises NotFoundError
    ✅ Update merges fields instead of replacing the document
    ✅ SQLAlchemy failures become DatabaseError
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from survey_api.exceptions import DatabaseError, NotFoundError, ValidationError
from survey_api.models.survey import Survey
from survey_api.services.survey_service import SurveyService


def _result_with(survey):
    result = MagicMock()
    result.scalar_one_or_none.return_value = survey
    return result


class TestSurveyServiceCreate:

    def setup_method(self):
        self.service = SurveyService()

    @pytest.mark.asyncio
    async def test_create_stores_body_verbatim(self, mock_db_session):
        body = {"title": "Lunch poll", "questions": [{"q": "Pizza?", "type": "yes_no"}]}

        await self.service.create_survey(mock_db_session, body)

        stored = mock_db_session.add.call_args.args[0]
        assert isinstance(stored, Survey)
        assert stored.data == body
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_drops_client_id(self, mock_db_session):
        await self.service.create_survey(mock_db_session, {"_id": "mine", "title": "t"})

        stored = mock_db_session.add.call_args.args[0]
        assert stored.data == {"title": "t"}

    @pytest.mark.asyncio
    async def test_create_wraps_database_failure(self, mock_db_session):
        mock_db_session.flush = AsyncMock(
            side_effect=OperationalError("INSERT", {}, Exception("db down"))
        )

        with pytest.raises(DatabaseError):
            await self.service.create_survey(mock_db_session, {"title": "t"})


class TestSurveyServiceGet:

    def setup_method(self):
        self.service = SurveyService()

    @pytest.mark.asyncio
    async def test_get_returns_document_with_id(self, mock_db_session):
        survey = Survey(id=uuid.uuid4(), data={"title": "Commute"})
        mock_db_session.execute.return_value = _result_with(survey)

        document = await self.service.get_survey(mock_db_session, str(survey.id))

        assert document == {"title": "Commute", "_id": str(survey.id)}

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.get_survey(mock_db_session, str(uuid.uuid4()))

    @pytest.mark.asyncio
    async def test_get_malformed_id_skips_query(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.get_survey(mock_db_session, "not-an-id")

        mock_db_session.execute.assert_not_awaited()


class TestSurveyServiceList:

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_db_session):
        result = MagicMock()
        result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = result

        assert await SurveyService().list_surveys(mock_db_session) == []


class TestSurveyServiceUpdate:

    def setup_method(self):
        self.service = SurveyService()

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, mock_db_session):
        survey = Survey(id=uuid.uuid4(), data={"title": "Old", "questions": [1, 2]})
        mock_db_session.execute.return_value = _result_with(survey)

        await self.service.update_survey(mock_db_session, str(survey.id), {"title": "New"})

        assert survey.data == {"title": "New", "questions": [1, 2]}
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(NotFoundError):
            await self.service.update_survey(mock_db_session, str(uuid.uuid4()), {"title": "x"})

    @pytest.mark.asyncio
    async def test_update_empty_body_rejected(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.update_survey(mock_db_session, str(uuid.uuid4()), {})
