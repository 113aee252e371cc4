"""
RFC 7807 Problem Details error response schemas.

Implements standard error response format for the API.
"""

from pydantic import BaseModel, Field


class ProblemDetails(BaseModel):
    """
    RFC 7807 Problem Details for HTTP APIs.

    Machine-readable error body returned for every non-2xx response.
    """

    type: str = Field(
        ...,
        description="URI reference that identifies the problem type",
        examples=["https://depcycle.internal/errors/graph-too-large"],
    )
    title: str = Field(..., description="Short, human-readable summary of the problem")
    status: int = Field(..., description="HTTP status code", ge=100, le=599)
    detail: str = Field(
        ..., description="Human-readable explanation specific to this occurrence"
    )
    instance: str = Field(
        ..., description="Request path that produced the problem"
    )
    correlation_id: str | None = Field(
        None, description="Correlation ID for request tracing"
    )
    node_count: int | None = Field(
        None, ge=0, description="Nodes in the rejected graph (413 responses)"
    )
    edge_count: int | None = Field(
        None, ge=0, description="Edges in the rejected graph (413 responses)"
    )

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "examples": [
                {
                    "type": "about:blank",
                    "title": "Unprocessable Entity",
                    "status": 422,
                    "detail": "Validation failed: projects.0.id is required",
                    "instance": "/api/v1/cycles/projects",
                },
                {
                    "type": "https://depcycle.internal/errors/graph-too-large",
                    "title": "Graph Too Large",
                    "status": 413,
                    "detail": "Graph too large for cycle analysis: 5000 nodes (max 2000), 9000 edges (max 20000)",
                    "instance": "/api/v1/cycles/projects",
                    "node_count": 5000,
                    "edge_count": 9000,
                },
            ]
        }


STATUS_TEXTS = {
    400: "Bad Request",
    404: "Not Found",
    413: "Graph Too Large",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def status_text(status_code: int) -> str:
    """Get human-readable status text for an HTTP status code."""
    return STATUS_TEXTS.get(status_code, "Error")
