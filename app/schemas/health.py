"""Health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus store reachability; carries no auth or account data."""

    status: Literal["ok", "degraded"] = Field(
        default="ok", description="'degraded' when the account/catalog store is unreachable"
    )
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"]
