"""RFC 7807 Problem Details responses.

Reference: https://datatracker.ietf.org/doc/html/rfc7807
"""

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.core.logging import request_id_ctx

ERROR_TYPE_BASE = "/errors"


class ProblemDetail(BaseModel):
    """RFC 7807 problem document.

    Attributes:
        type: URI identifying the error type.
        title: Short human-readable summary of the problem type.
        status: HTTP status code.
        detail: Explanation specific to this occurrence.
        instance: URI reference for this occurrence.
        code: Machine-readable error code.
        request_id: Request correlation ID.
    """

    type: str = Field(default="about:blank")
    title: str
    status: int = Field(..., ge=400, le=599)
    detail: str | None = None
    instance: str | None = None
    code: str | None = None
    request_id: str | None = None


class ProblemDetailResponse(JSONResponse):
    """JSON response with RFC 7807 content type."""

    media_type = "application/problem+json"


def problem_response(
    status: int,
    title: str,
    detail: str | None = None,
    error_code: str = "INTERNAL_ERROR",
) -> ProblemDetailResponse:
    """Build a problem+json response stamped with the current request id.

    Args:
        status: HTTP status code.
        title: Short problem summary.
        detail: Detailed explanation (optional).
        error_code: Machine-readable code, also used for the type URI.

    Returns:
        JSONResponse with problem+json content type.
    """
    request_id = request_id_ctx.get()

    problem = ProblemDetail(
        type=f"{ERROR_TYPE_BASE}/{error_code.lower().replace('_', '-')}",
        title=title,
        status=status,
        detail=detail,
        instance=f"/requests/{request_id}" if request_id else None,
        code=error_code,
        request_id=request_id,
    )

    return ProblemDetailResponse(
        status_code=status,
        content=problem.model_dump(exclude_none=True),
    )
