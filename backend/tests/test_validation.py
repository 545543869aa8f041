"""Identifier parsing and required-field checks."""

import uuid

import pytest

from survey_api.exceptions import ValidationError
from survey_api.services.validation import parse_document_id, require_fields


class TestParseDocumentId:

    def test_accepts_uuid_string(self):
        raw = uuid.uuid4()
        assert parse_document_id(str(raw)) == raw

    @pytest.mark.parametrize("raw", ["", "123", "65f0c0ffee0000000000abcd", "../etc/passwd"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            parse_document_id(raw, "survey")
        assert exc_info.value.field == "id"


class TestRequireFields:

    def test_blank_strings_count_as_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"name": "  ", "email": "a@b.c"}, ("name", "email"), "need both")
        assert exc_info.value.context["missing"] == ["name"]

    def test_falsy_non_strings_are_present(self):
        require_fields({"technical_issue": False, "rating": 0}, ("technical_issue", "rating"), "x")
