import uuid
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from filmbase.domain.exceptions import MissingRequiredFieldError


class MovieRequest(BaseModel):
    """Client-supplied movie fields, read from camelCase JSON.

    ``title`` must be present; its absence raises MissingRequiredFieldError
    before any instance exists. ``year_of_release`` falls back to 0 and
    ``genres`` to an empty tuple. Instances are frozen once built.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str
    year_of_release: int = 0
    genres: Tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def require_title(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("title") is None:
            raise MissingRequiredFieldError("title")
        return data

    @field_validator("genres", mode="before")
    @classmethod
    def genres_default_to_empty(cls, value: Any) -> Any:
        return () if value is None else value


class CreateMovieRequest(MovieRequest):
    pass


class UpdateMovieRequest(MovieRequest):
    pass


class MoviePublic(BaseModel):
    id: uuid.UUID
    title: str
    year_of_release: int
    genres: List[str]
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class MovieList(BaseModel):
    movies: list[MoviePublic]
