import uuid

from filmbase.applications.interfaces.dtos.movie import MoviePublic, UpdateMovieRequest
from filmbase.domain.exceptions import MovieNotFoundError
from filmbase.domain.models.movie import Movie
from filmbase.domain.ports.repositories.movie_repository import MovieRepository
from filmbase.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: uuid.UUID, movie_data: UpdateMovieRequest) -> MoviePublic:
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            logger.warning(f"Cannot update missing movie {movie_id}")
            raise MovieNotFoundError(movie_id)

        updated_movie = Movie(
            id=movie_id,
            title=movie_data.title,
            year_of_release=movie_data.year_of_release,
            genres=list(movie_data.genres),
        )

        result = await self.movie_repository.update(updated_movie)

        logger.info(f"Movie updated: {movie_id}")

        return MoviePublic.model_validate(result)
