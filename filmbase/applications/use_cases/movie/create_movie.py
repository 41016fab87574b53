import uuid

from filmbase.applications.interfaces.dtos.movie import CreateMovieRequest, MoviePublic
from filmbase.domain.models.movie import Movie
from filmbase.domain.ports.repositories.movie_repository import MovieRepository
from filmbase.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_data: CreateMovieRequest) -> MoviePublic:
        logger.info(f"Creating movie: {movie_data.title}")

        movie = Movie(
            id=uuid.uuid4(),
            title=movie_data.title,
            year_of_release=movie_data.year_of_release,
            genres=list(movie_data.genres),
        )

        created_movie = await self.movie_repository.create(movie)

        logger.info(f"Movie created successfully: {created_movie.id}")

        return MoviePublic.model_validate(created_movie)
