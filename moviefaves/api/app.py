"""FastAPI app, CORS, route registration and static client files."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from moviefaves.config import LOG_LEVEL, PUBLIC_DIR, ensure_data_dir

# Configure logging in the worker process (so store INFO logs are visible with uvicorn --reload)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from moviefaves.api.state import AppState, get_state

# Import routes after state to avoid circular imports
from moviefaves.api.routes import favorites

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    logger.info("Favorites stored in %s", get_state().favorites_store.path)
    yield


app = FastAPI(
    title="moviefaves API",
    description="Favorites store for the movie search client",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(favorites.router, prefix="/favorites", tags=["favorites"])

# Mounted last so /favorites wins over the catch-all static route
if PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")
else:
    logger.warning("Static directory %s not found; not serving client files", PUBLIC_DIR)
