from filmbase.applications.interfaces.dtos.filter_page import FilterPage
from filmbase.applications.interfaces.dtos.movie import MovieList, MoviePublic
from filmbase.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, filter_page: FilterPage) -> MovieList:
        if filter_page.title:
            movies = await self.movie_repository.search_by_title(
                title=filter_page.title,
                offset=filter_page.offset,
                limit=filter_page.limit,
            )
        else:
            movies = await self.movie_repository.get_all(offset=filter_page.offset, limit=filter_page.limit)

        return MovieList(movies=[MoviePublic.model_validate(movie) for movie in movies])
