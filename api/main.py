# api/main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from bookstore import __version__
from bookstore.config import configure_logging
from bookstore.errors import CatalogError
from bookstore.sa.database import get_database
from api.responses import catalog_error_response, error_response
from api.routes import authors, books, genres

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database on startup
    configure_logging()
    get_database().init_db()
    logger.info("Bookstore API started")
    yield


app = FastAPI(
    title="Bookstore API",
    version=__version__,
    description="API for managing books, authors and genres",
    lifespan=lifespan,
)


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    return catalog_error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return error_response(
        code="VALIDATION_FAILED",
        message="Invalid request",
        details={"errors": [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
            for error in exc.errors()
        ]},
        status_code=400,
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


app.include_router(authors.router)
app.include_router(books.router)
app.include_router(genres.router)
