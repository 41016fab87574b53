import uuid

from filmbase.applications.interfaces.dtos.movie import MoviePublic
from filmbase.domain.exceptions import MovieNotFoundError
from filmbase.domain.ports.repositories.movie_repository import MovieRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: uuid.UUID) -> MoviePublic:
        movie = await self.movie_repository.get_by_id(movie_id)
        if not movie:
            raise MovieNotFoundError(movie_id)

        return MoviePublic.model_validate(movie)
