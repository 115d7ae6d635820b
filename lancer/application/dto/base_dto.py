"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Accept both the wire alias and the field name
        populate_by_name=True,
        str_strip_whitespace=True,
        # Callers send extra correlation fields we do not use
        extra="ignore",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""

    # Mobile clients occasionally send numeric ids
    model_config = ConfigDict(coerce_numbers_to_str=True)


class HealthCheckResponseDTO(BaseDTO):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    environment: str = Field(description="Deployment environment")
    version: Optional[str] = Field(default=None, description="Application version")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Check timestamp"
    )
