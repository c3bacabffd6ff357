import logging

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from starlette.exceptions import HTTPException as StarletteHTTPException  # noqa: E402

from app.config import CORS_ALLOW_ORIGINS  # noqa: E402
from app.api.base import api_router  # noqa: E402
from app.features.spotify import SpotifyError, spotify_error_handler  # noqa: E402
from app.middleware.session import SessionMiddleware  # noqa: E402

logger = logging.getLogger(__name__)

app = FastAPI(
    title="StudyBeats Backend API",
    description="Backend API for StudyBeats - study/break timer with Spotify break music",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Server-side sessions (Spotify token lives here)
app.add_middleware(SessionMiddleware)

app.add_exception_handler(SpotifyError, spotify_error_handler)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Invalid request"})


# Include all API routes
app.include_router(api_router)


@app.get("/")
def read_root():
    return {
        "message": "StudyBeats Backend API",
        "docs": "/docs",
        "version": "1.0.0"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
