"""Tests for MCP server tools"""

import pytest

from argumend.consts import SERVER_NAME
from argumend.models import MatchBlock, NameScore
from argumend.server import check_keywords, mcp, similarity, suggest_names


def test_mcp_server_creation():
    """Test that MCP server is created with the package name"""
    assert mcp is not None
    assert mcp.name == SERVER_NAME


class TestSimilarityTool:
    """Test the similarity tool"""

    @pytest.mark.asyncio
    async def test_ratio_and_blocks(self):
        """Test ratio and matching blocks are reported"""
        response = await similarity("abcd", "bcde")

        assert response.status == "success"
        assert response.data["ratio"] == 0.75
        assert response.data["matches"] == [MatchBlock(a_start=1, b_start=0, length=3)]
        assert response.metadata == {"match_count": 1, "matched_length": 3}

    @pytest.mark.asyncio
    async def test_empty_names(self):
        """Test two empty names are identical"""
        response = await similarity("", "")

        assert response.data["ratio"] == 1.0
        assert response.data["matches"] == []


class TestSuggestNamesTool:
    """Test the suggest_names tool"""

    @pytest.mark.asyncio
    async def test_exact_match(self, clean_env):
        """Test an exact name is reported without ranking"""
        response = await suggest_names("kw", ["kw", "kww"])

        assert response.status == "success"
        assert response.data == [NameScore(name="kw", score=1.0)]
        assert response.metadata == {"exact_match": True}

    @pytest.mark.asyncio
    async def test_ranked_suggestions(self, clean_env):
        """Test close names come back best first with scores"""
        response = await suggest_names(
            "iterations",
            [
                "niterations",
                "ncycles_per_iteration",
                "niterations_per_cycle",
                "abcdef",
                "iter",
            ],
        )

        assert response.status == "success"
        assert [s.name for s in response.data] == [
            "niterations",
            "niterations_per_cycle",
        ]
        assert response.data[0].score == pytest.approx(20 / 21)
        assert response.suggestions == [
            "Try 'niterations' instead",
            "Try 'niterations_per_cycle' instead",
        ]
        assert response.metadata == {"exact_match": False, "n": 3, "cutoff": 0.6}

    @pytest.mark.asyncio
    async def test_explicit_options(self, clean_env):
        """Test n and cutoff arguments are honoured"""
        response = await suggest_names("ab", ["abx", "xab", "abc"], n=2, cutoff=0.8)

        assert [s.name for s in response.data] == ["abx", "xab"]

    @pytest.mark.asyncio
    async def test_no_close_match(self, clean_env):
        """Test nothing close still succeeds with an empty result"""
        response = await suggest_names("zzz", ["alpha", "beta"])

        assert response.status == "success"
        assert response.data == []
        assert "No candidate" in response.message


class TestCheckKeywordsTool:
    """Test the check_keywords tool"""

    @pytest.mark.asyncio
    async def test_valid_keywords(self, clean_env):
        """Test valid names pass"""
        response = await check_keywords(["alpha"], ["alpha", "beta"])

        assert response.status == "success"
        assert response.metadata == {"given": ["alpha"], "valid": True}

    @pytest.mark.asyncio
    async def test_unsupported_keywords(self, clean_env):
        """Test unknown names become an error response with suggestions"""
        response = await check_keywords(["kww"], ["kw", "other"])

        assert response.status == "error"
        assert response.message == (
            "found unsupported keyword argument: 'kww', perhaps you meant 'kw'"
        )
        assert response.suggestions == ["kw"]
        assert response.metadata["exception_type"] == "UnsupportedKeywordError"
        assert response.metadata["unsupported"] == ["kww"]
