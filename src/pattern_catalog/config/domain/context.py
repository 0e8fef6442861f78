"""Application context configuration — the single creation point of shared app state."""

from pydantic import BaseModel, Field


class ContextConfig(BaseModel, frozen=True):
    """Settings used to construct the one AppContext shared by all services."""

    app_name: str = Field(default="pattern-catalog", min_length=1)
    environment: str = Field(default="development", min_length=1)
