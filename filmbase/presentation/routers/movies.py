import uuid
from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from filmbase.applications.interfaces.dtos.filter_page import FilterPage
from filmbase.applications.interfaces.dtos.message import Message
from filmbase.applications.interfaces.dtos.movie import (
    CreateMovieRequest,
    MovieList,
    MoviePublic,
    UpdateMovieRequest,
)
from filmbase.applications.use_cases.movie.create_movie import CreateMovieUseCase
from filmbase.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from filmbase.applications.use_cases.movie.get_movie import GetMovieUseCase
from filmbase.applications.use_cases.movie.get_movies import GetMoviesUseCase
from filmbase.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from filmbase.domain.exceptions import NotFoundError
from filmbase.domain.ports.repositories.movie_repository import MovieRepository
from filmbase.infrastructure.config.dependencies import get_movie_repository

router = APIRouter(prefix="/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(movie: CreateMovieRequest, movie_repository: MovieRepositoryDep):
    use_case = CreateMovieUseCase(movie_repository)
    return await use_case.execute(movie)


@router.get("/{movie_id}", response_model=MoviePublic)
async def read_movie(movie_id: uuid.UUID, movie_repository: MovieRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.get("/", response_model=MovieList)
async def read_movies(filter_movies: Annotated[FilterPage, Query()], movie_repository: MovieRepositoryDep):
    use_case = GetMoviesUseCase(movie_repository)
    return await use_case.execute(filter_movies)


@router.put("/{movie_id}", response_model=MoviePublic)
async def update_movie(movie_id: uuid.UUID, movie: UpdateMovieRequest, movie_repository: MovieRepositoryDep):
    try:
        use_case = UpdateMovieUseCase(movie_repository)
        return await use_case.execute(movie_id, movie)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: uuid.UUID, movie_repository: MovieRepositoryDep):
    try:
        use_case = DeleteMovieUseCase(movie_repository)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
