import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import DataError
from sqlalchemy.ext.asyncio import AsyncSession

from filmbase.domain.exceptions import MovieNotFoundError, UnstorableValueError
from filmbase.domain.models.movie import Movie as DomainMovie
from filmbase.domain.ports.repositories.movie_repository import MovieRepository
from filmbase.infrastructure.persistence.models import Movie as SQLMovie


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            title=sql_movie.title,
            year_of_release=sql_movie.year_of_release,
            genres=list(sql_movie.genres or []),
        )

    async def _get_row(self, movie_id: uuid.UUID) -> Optional[SQLMovie]:
        query = select(SQLMovie).where(SQLMovie.id == movie_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def _commit(self) -> None:
        # year_of_release is the only integer column; SQLite raises OverflowError
        # past 64 bits and Postgres reports out-of-range bigints as DataError.
        try:
            await self.session.commit()
        except (OverflowError, DataError) as e:
            await self.session.rollback()
            raise UnstorableValueError("yearOfRelease", str(e)) from e

    async def get_by_id(self, movie_id: uuid.UUID) -> Optional[DomainMovie]:
        movie = await self._get_row(movie_id)
        return self._to_domain(movie) if movie else None

    async def get_all(self, offset: int = 0, limit: int = 100) -> List[DomainMovie]:
        query = select(SQLMovie).order_by(SQLMovie.title, SQLMovie.id).offset(offset).limit(limit)
        result = await self.session.execute(query)
        movies = result.scalars().all()
        return [self._to_domain(movie) for movie in movies]

    async def search_by_title(self, title: str, offset: int = 0, limit: int = 100) -> List[DomainMovie]:
        query = (
            select(SQLMovie)
            .where(SQLMovie.title.ilike(f"%{title}%"))
            .order_by(SQLMovie.title, SQLMovie.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return [self._to_domain(movie) for movie in result.scalars().all()]

    async def create(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = SQLMovie(
            id=movie.id,
            title=movie.title,
            year_of_release=movie.year_of_release,
            genres=list(movie.genres),
        )
        self.session.add(sql_movie)
        await self._commit()
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    async def update(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = await self._get_row(movie.id)

        if not sql_movie:
            raise MovieNotFoundError(movie.id)

        sql_movie.title = movie.title
        sql_movie.year_of_release = movie.year_of_release
        sql_movie.genres = list(movie.genres)

        await self._commit()
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    async def delete(self, movie_id: uuid.UUID) -> bool:
        movie = await self._get_row(movie_id)

        if not movie:
            return False

        await self.session.delete(movie)
        await self.session.commit()
        return True
