from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.middleware_correlation import CorrelationIdMiddleware
from app.core.logging import get_logger, setup_logging
from app.core.errors import register_exception_handlers
from app.db.session import engine
from app.models.base import Base
from app.models import author, book  # noqa: F401  registers tables

# GraphQL
from app.api.graphql.schema import create_graphql_router


setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    if settings.CREATE_SCHEMA:
        get_logger(__name__).info("Creating database schema")
        Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Books API - a GraphQL catalog of books and their authors.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware - allow GraphiQL to make API requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8000", "http://127.0.0.1:8000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middlewares
app.add_middleware(CorrelationIdMiddleware)

# Root endpoint
@app.get("/")
async def root():
    """API root endpoint with basic information."""
    return {
        "message": "Welcome to Books API",
        "version": "1.0.0",
        "graphql_url": settings.GRAPHQL_PATH,
        "graphiql_enabled": settings.GRAPHIQL,
    }

register_exception_handlers(app)

# Mount GraphQL
app.include_router(create_graphql_router(), prefix=settings.GRAPHQL_PATH)
