"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokemon_logger.api import auth, images, pokemon
from pokemon_logger.config import get_settings
from pokemon_logger.database import Database
from pokemon_logger.errors import AppError
from pokemon_logger.services.image_service import ImageService
from pokemon_logger.services.llm import LLMService
from pokemon_logger.services.pokeapi import PokeAPIClient

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    database = Database(settings.database_url)
    database.create_all()
    app.state.database = database
    app.state.pokeapi = PokeAPIClient()
    app.state.image_service = ImageService(settings)
    app.state.llm_service = LLMService(settings)
    logger.info(f"Pokemon Logger API started ({settings.environment})")
    yield
    await app.state.pokeapi.aclose()
    database.dispose()


app = FastAPI(
    title="Pokemon Logger API",
    description="Personal Pokemon collection tracker with photo identification",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Report application errors as ``{"error": message}``."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with the first problem found."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Keep framework errors (unknown route, wrong method) in the same shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Report anything unexpected as a generic 500 without internals."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Register routers
app.include_router(auth.router)
app.include_router(pokemon.router)
app.include_router(images.router)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "OK",
        "message": "Pokemon Logger API is running!",
        "environment": settings.environment,
    }
