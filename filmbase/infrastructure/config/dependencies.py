from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from filmbase.domain.ports.repositories.movie_repository import MovieRepository
from filmbase.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from filmbase.infrastructure.config.settings import Settings
from filmbase.infrastructure.persistence.database import get_session


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)
