"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tracker.api import router as api_router
from tracker.api.error_handlers import register_error_handlers
from tracker.core.config import Settings, get_settings
from tracker.services.authenticator import build_authenticator
from tracker.services.session_store import SessionStore


def create_app(
    settings: Settings | None = None,
    session_store: SessionStore | None = None,
) -> FastAPI:
    """
    Build the application.

    The authenticator (and, for the session strategy, its session store) is
    created here once and kept on app.state; request handlers reach it through
    the get_authenticator dependency.
    """
    settings = settings or get_settings()

    application = FastAPI(
        title="Task Tracker API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.settings = settings
    application.state.authenticator = build_authenticator(settings, session_store)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)
    application.include_router(api_router, prefix=settings.API_PREFIX)

    @application.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Task Tracker API"}

    return application


app = create_app()
