import uuid

from filmbase.applications.interfaces.dtos.message import Message
from filmbase.domain.exceptions import MovieNotFoundError
from filmbase.domain.ports.repositories.movie_repository import MovieRepository
from filmbase.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: uuid.UUID) -> Message:
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            logger.warning(f"Cannot delete missing movie {movie_id}")
            raise MovieNotFoundError(movie_id)

        success = await self.movie_repository.delete(movie_id)
        if not success:
            raise MovieNotFoundError(movie_id)

        logger.info(f"Movie deleted: {movie_id}")

        return Message(message=f"Movie '{existing_movie.title}' deleted successfully")
