# === FILE: sitecrawl/config.py ===
"""
Settings for a single SiteCrawl run.
Pydantic describes the schema and validates values coming from the CLI.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitecrawl import __version__

Traversal = Literal["depth-first", "breadth-first"]


class CrawlerConfig(BaseModel):
    """Configuration for one crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(3, ge=0, description="Maximum number of hops from the seed page.")
    timeout: float = Field(10.0, gt=0, description="Timeout per request (seconds).")
    user_agent: str = Field(
        f"SiteCrawl/{__version__}", min_length=1, description="User-Agent header."
    )
    retry_times: int = Field(2, ge=0, description="Retries on network errors.")
    traversal: Traversal = Field(
        "depth-first", description="Work list order: LIFO (depth-first) or FIFO (breadth-first)."
    )

    @field_validator("user_agent", mode="before")
    def _strip_user_agent(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v
