import sys
from pathlib import Path

# Make backend/ importable when launched as a script
backend_dir = Path(__file__).resolve().parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

import logging
from dotenv import load_dotenv

# Load .env BEFORE settings are first read
env_path = backend_dir / ".env"
load_dotenv(env_path)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.core.config import get_settings
from app.core.rate_limit import limiter
from app.routes.workbench import router as workbench_router

settings = get_settings()

logging.basicConfig(
    format="%(asctime)s:%(levelname)s:%(name)s:%(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Text Workbench - Backend",
    version=settings.app_version,
    description="Live text metrics and side-by-side sample comparison",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware — restrict to known frontend origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(workbench_router, prefix="/api")


@app.get("/api/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "reading_words_per_minute": settings.reading_words_per_minute,
    }


logger.info("Text Workbench backend ready (version %s)", settings.app_version)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
