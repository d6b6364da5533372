"""Main application entry point: the tea preference HTTP API."""

import logging
import random
import re
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from . import __version__
from .config import Settings, get_settings
from .models import Preference, summarize
from .store import InvalidIndex, PreferenceStore, StorageError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

_INDEX_PATTERN = re.compile(r"-?[0-9]+")


def validate_environment() -> Settings:
    """Validate all environment variables on startup."""
    try:
        settings = get_settings()
        logger.info("Environment variables validated successfully")
        return settings
    except ValidationError as e:
        logger.error("ERROR: Invalid environment variables:")
        logger.error(str(e))
        sys.exit(1)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body used by every failing route."""
    return JSONResponse(status_code=status_code, content={"error": message})


def get_store(request: Request) -> PreferenceStore:
    """Dependency returning the store owned by the running app."""
    return request.app.state.store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown."""
    # Startup
    logger.info("Starting Tea Roulette...")
    store: PreferenceStore = app.state.store
    logger.info(f"=== Data file: {store.path} ===")
    try:
        store.ensure_exists()
    except StorageError as e:
        # Keep serving; every request will answer 500 until the file is usable
        logger.error(f"Could not prepare data file: {e}")
    logger.info("Tea Roulette started successfully")

    yield

    # Shutdown
    logger.info("Tea Roulette shutdown complete")


async def invalid_input_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid input data")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app around a store for ``settings.data_file``."""
    if settings is None:
        settings = validate_environment()

    app = FastAPI(
        title="Tea Roulette",
        description="Register tea preferences and spin a wheel to pick who makes the tea",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = PreferenceStore(settings.data_file)
    app.add_exception_handler(RequestValidationError, invalid_input_handler)

    register_routes(app)

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(settings.static_dir), html=True), name="static")
        logger.info(f"Serving static files from {settings.static_dir}")

    return app


def register_routes(app: FastAPI) -> None:
    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "Tea Roulette",
            "status": "running",
            "version": __version__,
        }

    @app.get("/health")
    def health_check(store: PreferenceStore = Depends(get_store)):
        """Health check endpoint.

        Verifies the data file can be read and returns status.
        """
        if store.check_health():
            return {"status": "healthy", "store": "readable"}
        return {"status": "unhealthy", "store": "unreadable"}

    @app.get("/api/preferences")
    def list_preferences(store: PreferenceStore = Depends(get_store)):
        """Return the full preference list."""
        try:
            return store.load_all()
        except StorageError:
            logger.exception("Error reading preferences")
            return error_response(500, "Error reading preferences")

    @app.post("/api/preferences")
    def add_preference(pref: Preference, store: PreferenceStore = Depends(get_store)):
        """Append a preference and return the updated list."""
        try:
            return store.append(pref)
        except StorageError:
            logger.exception("Error adding preference")
            return error_response(500, "Error adding preference")

    # Must be registered before the index route so "all" is not read as an index
    @app.delete("/api/preferences/all")
    def remove_all_preferences(store: PreferenceStore = Depends(get_store)):
        """Remove every preference."""
        try:
            return store.clear()
        except StorageError:
            logger.exception("Error deleting all preferences")
            return error_response(500, "Error deleting all preferences")

    @app.delete("/api/preferences/{index}")
    def remove_preference(index: str, store: PreferenceStore = Depends(get_store)):
        """Remove the preference at a positional index and return the updated list."""
        if not _INDEX_PATTERN.fullmatch(index):
            logger.info(f"Rejected non-numeric index: {index!r}")
            return error_response(400, "Invalid index")
        try:
            return store.remove_at(int(index))
        except InvalidIndex as e:
            logger.info(str(e))
            return error_response(400, "Invalid index")
        except StorageError:
            logger.exception("Error removing person")
            return error_response(500, "Error removing person")

    @app.get("/api/spin")
    def spin(store: PreferenceStore = Depends(get_store)):
        """Pick a random person server-side and describe their tea."""
        try:
            prefs = store.load_all()
        except StorageError:
            logger.exception("Error spinning the wheel")
            return error_response(500, "Error spinning the wheel")
        if not prefs:
            return error_response(400, "No people available to spin.")

        index = random.randrange(len(prefs))
        winner = prefs[index]
        logger.info(f"Server spin picked {winner.name} (index {index} of {len(prefs)})")
        return {
            "index": index,
            **winner.model_dump(),
            "preferences": summarize(winner),
        }


def run() -> None:
    """Run the API with uvicorn using the configured host and port."""
    settings = validate_environment()
    logging.getLogger().setLevel(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


# Create FastAPI app
app = create_app()


if __name__ == "__main__":
    run()
