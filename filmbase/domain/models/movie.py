import uuid
from typing import List

from pydantic import BaseModel, Field


class Movie(BaseModel):
    id: uuid.UUID
    title: str
    year_of_release: int = 0
    genres: List[str] = Field(default_factory=list)
