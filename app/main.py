from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session, sessionmaker
import uvicorn
from app.core.config import Settings, settings
from app.core.middleware_correlation import CorrelationIdMiddleware
from app.core.logging import get_logger, setup_logging
from app.core.errors import register_exception_handlers
from app.db.session import build_engine, build_session_factory
from app.graphql.schema import create_graphql_router


def create_app(
    session_factory: sessionmaker[Session] | None = None,
    app_settings: Settings = settings,
) -> FastAPI:
    """
    Build the application around one session factory.
    The factory is created from DATABASE_URL unless one is supplied.
    """
    if session_factory is None:
        session_factory = build_session_factory(build_engine(app_settings.DATABASE_URL))

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="GraphQL API for books and the authors who wrote them.",
        version="1.0.0",
    )
    app.state.session_factory = session_factory

    # Any origin may call the API; no cookies are involved
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    # Root endpoint
    @app.get("/")
    async def root():
        """API root endpoint with basic information."""
        return {
            "message": f"Welcome to {app_settings.PROJECT_NAME}",
            "version": "1.0.0",
            "graphql_url": app_settings.GRAPHQL_PATH,
        }

    register_exception_handlers(app)
    app.include_router(create_graphql_router(app_settings))
    return app


setup_logging(settings.LOG_LEVEL)

app = create_app()


def run() -> None:
    logger = get_logger(__name__)
    logger.info(
        "Server running at http://localhost:%s%s", settings.PORT, settings.GRAPHQL_PATH
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
