from typing import Optional

from pydantic import BaseModel, Field


class FilterPage(BaseModel):
    """Paging window for movie listings, optionally narrowed by a title fragment."""

    offset: int = Field(default=0, ge=0, description="Number of movies to skip")
    limit: int = Field(default=100, gt=0, le=1000, description="Maximum number of movies to return")
    title: Optional[str] = Field(default=None, min_length=1, description="Case-insensitive title fragment")
