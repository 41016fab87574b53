import uuid

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from filmbase.domain.exceptions import MovieNotFoundError, UnstorableValueError
from filmbase.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)

from .conftest import BaseIntegrationTest
from .factories import movie_factory


class TestSQLAlchemyMovieRepository(BaseIntegrationTest):
    """Integration tests for SQLAlchemy movie repository"""

    @pytest_asyncio.fixture
    async def sqlite_session(self, sqlite_engine):
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest.fixture
    def movie_repository(self, sqlite_session):
        return SQLAlchemyMovieRepository(sqlite_session)

    @pytest.mark.asyncio
    async def test_create_movie(self, movie_repository):
        movie = movie_factory.create_domain_movie()

        created = await movie_repository.create(movie)

        assert created == movie

    @pytest.mark.asyncio
    async def test_get_movie_by_id(self, movie_repository):
        created = await movie_repository.create(movie_factory.create_domain_movie(title="Arrival"))

        found = await movie_repository.get_by_id(created.id)

        assert found is not None
        assert found.title == "Arrival"
        assert found.genres == ["Sci-Fi", "Drama"]

    @pytest.mark.asyncio
    async def test_reads_rows_written_directly(self, movie_repository, sqlite_session):
        row = movie_factory.create_sql_movie(title="Metropolis", year_of_release=1927, genres=[])
        sqlite_session.add(row)
        await sqlite_session.commit()

        found = await movie_repository.get_by_id(row.id)

        assert found.title == "Metropolis"
        assert found.year_of_release == 1927
        assert found.genres == []

    @pytest.mark.asyncio
    async def test_get_all_movies_ordered_by_title(self, movie_repository):
        for title in ["Heat", "Alien", "Fargo"]:
            await movie_repository.create(movie_factory.create_domain_movie(title=title))

        movies = await movie_repository.get_all()

        assert [movie.title for movie in movies] == ["Alien", "Fargo", "Heat"]

    @pytest.mark.asyncio
    async def test_get_all_movies_paginated(self, movie_repository):
        for title in ["Heat", "Alien", "Fargo"]:
            await movie_repository.create(movie_factory.create_domain_movie(title=title))

        movies = await movie_repository.get_all(offset=1, limit=1)

        assert [movie.title for movie in movies] == ["Fargo"]

    @pytest.mark.asyncio
    async def test_update_movie(self, movie_repository):
        created = await movie_repository.create(movie_factory.create_domain_movie())

        changed = created.model_copy(update={"title": "Dune: Part Two", "genres": ["Adventure"]})
        updated = await movie_repository.update(changed)

        assert updated.id == created.id
        assert updated.title == "Dune: Part Two"
        assert updated.genres == ["Adventure"]

    @pytest.mark.asyncio
    async def test_update_missing_movie(self, movie_repository):
        with pytest.raises(MovieNotFoundError):
            await movie_repository.update(movie_factory.create_domain_movie())

    @pytest.mark.asyncio
    async def test_delete_movie(self, movie_repository):
        created = await movie_repository.create(movie_factory.create_domain_movie())

        assert await movie_repository.delete(created.id) is True
        assert await movie_repository.get_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_movie_not_found(self, movie_repository):
        assert await movie_repository.get_by_id(uuid.uuid4()) is None
        assert await movie_repository.delete(uuid.uuid4()) is False

    @pytest.mark.asyncio
    async def test_create_movie_year_beyond_bigint(self, movie_repository):
        with pytest.raises(UnstorableValueError) as exc_info:
            await movie_repository.create(movie_factory.create_domain_movie(year_of_release=2**63))

        assert exc_info.value.field_name == "yearOfRelease"
        assert await movie_repository.get_all() == []

    @pytest.mark.asyncio
    async def test_update_movie_year_beyond_bigint(self, movie_repository):
        created = await movie_repository.create(movie_factory.create_domain_movie())

        with pytest.raises(UnstorableValueError):
            await movie_repository.update(created.model_copy(update={"year_of_release": 2**63}))

        assert (await movie_repository.get_by_id(created.id)).year_of_release == 2021

    @pytest.mark.asyncio
    async def test_search_by_title(self, movie_repository):
        for title in ["Alien", "Aliens", "Heat"]:
            await movie_repository.create(movie_factory.create_domain_movie(title=title))

        movies = await movie_repository.search_by_title("ALIEN")

        assert [movie.title for movie in movies] == ["Alien", "Aliens"]
