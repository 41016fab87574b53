import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from filmbase.applications.interfaces.dtos.message import Message
from filmbase.domain.exceptions import MissingRequiredFieldError, ValidationError
from filmbase.infrastructure.config.dependencies import get_settings
from filmbase.infrastructure.logging.logger import Logger, setup_logging
from filmbase.infrastructure.persistence.database import create_tables, dispose_engine, get_engine
from filmbase.presentation.routers import movies

setup_logging(get_settings().LOG_LEVEL, noisy_libs={"sqlalchemy.engine": logging.WARNING})

logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    engine = get_engine()
    if settings.CREATE_TABLES:
        await create_tables(engine)
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="FilmBase", lifespan=lifespan)

app.include_router(movies.router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    error_type = "missing" if isinstance(exc, MissingRequiredFieldError) else "value_error"
    return JSONResponse(
        status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
        content={"detail": [{"loc": ["body", exc.field_name], "msg": str(exc), "type": error_type}]},
    )


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "FilmBase API"}
