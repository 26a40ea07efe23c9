"""Tests for response models"""

import pytest
from pydantic import ValidationError

from argumend.exceptions import ArguMendLoadError, UnsupportedKeywordError
from argumend.models import MatchBlock, NameScore, Response


class TestResponseFromError:
    """Test Response.from_error conversion"""

    def test_argumend_error_keeps_context(self):
        """Test argumend errors carry their details into the response"""
        error = UnsupportedKeywordError(
            "found unsupported keyword argument: 'kww', perhaps you meant 'kw'",
            errors=["found unsupported keyword argument: 'kww', perhaps you meant 'kw'"],
            suggestions=["kw"],
            context={"unsupported": ["kww"]},
        )

        response = Response.from_error(error)

        assert response.status == "error"
        assert response.message == error.message
        assert response.errors == error.errors
        assert response.suggestions == ["kw"]
        assert response.metadata == {
            "unsupported": ["kww"],
            "exception_type": "UnsupportedKeywordError",
        }

    def test_load_error(self):
        """Test load errors report their type"""
        response = Response.from_error(ArguMendLoadError("syntax error: nope"))

        assert response.metadata["exception_type"] == "ArguMendLoadError"
        assert response.errors == []

    def test_generic_exception(self):
        """Test other exceptions get a generic message"""
        response = Response.from_error(ValueError("boom"))

        assert response.status == "error"
        assert response.message == "Unexpected error: boom"
        assert response.errors == ["boom"]
        assert response.metadata == {"exception_type": "ValueError"}


class TestModels:
    """Test matching models"""

    def test_response_requires_known_status(self):
        """Test status is restricted to success or error"""
        with pytest.raises(ValidationError):
            Response(status="maybe", message="?")

    def test_name_score_bounds(self):
        """Test scores outside [0, 1] are rejected"""
        assert NameScore(name="kw", score=0.8).score == 0.8

        with pytest.raises(ValidationError):
            NameScore(name="kw", score=1.2)

    def test_match_block_dump(self):
        """Test match blocks serialize to plain dicts"""
        block = MatchBlock(a_start=1, b_start=0, length=3)
        assert block.model_dump() == {"a_start": 1, "b_start": 0, "length": 3}
