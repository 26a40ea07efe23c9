from typing import Any, Literal

from pydantic import BaseModel, Field

from .exceptions import ArguMendError

# =============================================================================
# UNIFIED RESPONSE MODEL
# =============================================================================
# Single response type for all MCP tools


class Response(BaseModel):
    """Unified response type for all MCP tools."""

    status: Literal["success", "error"] = Field(
        ..., description="Response status indicating outcome"
    )
    message: str = Field(..., description="Human-readable summary of the response")
    data: Any | None = Field(
        None,
        description="Response payload - can be dict, list, or any serializable type",
    )
    errors: list[str] = Field(
        default_factory=list, description="List of error messages"
    )
    suggestions: list[str] = Field(
        default_factory=list, description="Actionable suggestions for the user"
    )
    metadata: dict[str, Any] | None = Field(
        None, description="Additional context and domain-specific information"
    )

    @classmethod
    def from_error(cls, error: Exception) -> "Response":
        """Create Response from any Exception, keeping argumend context.

        Args:
            error: Any Exception instance

        Returns:
            Response object with error details
        """
        if isinstance(error, ArguMendError):
            return cls(
                status="error",
                message=error.message,
                errors=error.errors,
                suggestions=error.suggestions,
                metadata={**error.context, "exception_type": type(error).__name__},
            )

        return cls(
            status="error",
            message=f"Unexpected error: {str(error)}",
            errors=[str(error)],
            suggestions=["Check server logs for detailed information"],
            metadata={"exception_type": type(error).__name__},
        )


# =============================================================================
# MATCHING MODELS
# =============================================================================
# Serializable views of the matching engine's results for tool responses.


class MatchBlock(BaseModel):
    """One matching block between two names."""

    a_start: int = Field(..., description="Start index in the first name")
    b_start: int = Field(..., description="Start index in the second name")
    length: int = Field(..., description="Number of matching characters")


class NameScore(BaseModel):
    """A candidate name with its similarity ratio against the looked-up name."""

    name: str = Field(..., description="Candidate name")
    score: float = Field(..., ge=0.0, le=1.0, description="Similarity ratio")
