"""argumend MCP server implementation."""

import logging

from mcp.server.fastmcp import FastMCP

from .config import get_config, setup_logging
from .consts import SERVER_NAME
from .keywords import check_keyword_arguments
from .matching import (
    extract_close_matches,
    find_all_matches,
    score_candidates,
    similarity_ratio,
)
from .models import MatchBlock, NameScore, Response

logger = logging.getLogger("argumend.server")

mcp = FastMCP(
    name=SERVER_NAME,
    instructions="""
    argumend MCP server.

    This MCP server allows you to:
    1. Measure how similar two identifiers are.
    2. Find the valid names closest to a mistyped one.
    3. Check a set of keyword argument names against the names a function accepts.
    """,
    log_level=get_config().log_level,
)


@mcp.tool()
async def similarity(a: str, b: str) -> Response:
    """Compare two names and report their similarity ratio.

    The ratio is 2 * matched / (len(a) + len(b)), where matched is the total
    length of the common blocks found by repeatedly taking the longest common
    substring.

    Args:
        a: First name
        b: Second name

    Returns:
        The ratio in [0, 1] and the matching blocks.
    """
    logger.info(f"Comparing '{a}' with '{b}'")

    try:
        matches = find_all_matches(a, b)
        matched = sum(m.len for m in matches)
        ratio = similarity_ratio(a, b)

        return Response(
            status="success",
            message=f"Similarity of '{a}' and '{b}' is {ratio:.3f}",
            data={
                "a": a,
                "b": b,
                "ratio": ratio,
                "matches": [
                    MatchBlock(a_start=m.a_start, b_start=m.b_start, length=m.len)
                    for m in matches
                ],
            },
            metadata={"match_count": len(matches), "matched_length": matched},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def suggest_names(
    name: str,
    candidates: list[str],
    n: int | None = None,
    cutoff: float | None = None,
) -> Response:
    """Find the candidate names closest to a possibly mistyped name.

    Args:
        name: The name to look up
        candidates: Valid names to choose from
        n: Maximum number of suggestions (default from server config)
        cutoff: Minimum similarity ratio in [0, 1] (default from server config)

    Returns:
        Ranked suggestions with their scores, best first. An exact match is
        reported directly without ranking.
    """
    logger.info(f"Suggesting names for '{name}' among {len(candidates)} candidates")

    if name in candidates:
        return Response(
            status="success",
            message=f"'{name}' is a valid name",
            data=[NameScore(name=name, score=1.0)],
            metadata={"exact_match": True},
        )

    try:
        config = get_config()
        n = config.max_suggestions if n is None else n
        cutoff = config.cutoff if cutoff is None else cutoff

        ranked = extract_close_matches(name, candidates, n=n, cutoff=cutoff)
        scores = {s.candidate: s.score for s in score_candidates(name, ranked)}

        if not ranked:
            return Response(
                status="success",
                message=f"No candidate is a close match for '{name}'",
                data=[],
                suggestions=[
                    "Lower the cutoff to see weaker matches",
                    "Check that the candidate list is complete",
                ],
                metadata={"exact_match": False, "n": n, "cutoff": cutoff},
            )

        return Response(
            status="success",
            message=f"Found {len(ranked)} close matches for '{name}'",
            data=[NameScore(name=c, score=scores[c]) for c in ranked],
            suggestions=[f"Try '{c}' instead" for c in ranked],
            metadata={"exact_match": False, "n": n, "cutoff": cutoff},
        )
    except Exception as e:
        return Response.from_error(e)


@mcp.tool()
async def check_keywords(given: list[str], valid_names: list[str]) -> Response:
    """Check keyword argument names used in a call against the accepted names.

    Args:
        given: Keyword names used at the call site
        valid_names: Keyword names the function accepts

    Returns:
        Success if every name is accepted, otherwise an error listing each
        unsupported name with "did you mean" suggestions.
    """
    logger.info(f"Checking keywords {given} against {len(valid_names)} valid names")

    try:
        check_keyword_arguments(given, valid_names)

        return Response(
            status="success",
            message="All keyword arguments are supported",
            data=None,
            metadata={"given": given, "valid": True},
        )
    except Exception as e:
        return Response.from_error(e)


def main() -> None:
    """Run the MCP server."""
    setup_logging(get_config().log_level)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
