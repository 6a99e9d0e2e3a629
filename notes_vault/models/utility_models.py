"""Pydantic input models for utility operations.

This module defines input models for utility tools:
- Server and vault health check
"""

from __future__ import annotations

from pydantic import BaseModel


class HealthInput(BaseModel):
    """Input model for the health tool.

    Takes no parameters, but using a model maintains API consistency.

    Examples:
        >>> HealthInput()
    """

    # No fields required - this model exists for API consistency
    # All tools use Pydantic models even if they have no parameters

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [{}]
        }
