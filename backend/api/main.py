"""
FastAPI main application.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import API_V1_PREFIX, CORS_ORIGINS, LOG_LEVEL
from core.config_validator import config_validator
from api.models.responses import ErrorResponse
from api.routes import transcripts

logging.basicConfig(
    level=LOG_LEVEL if isinstance(logging.getLevelName(LOG_LEVEL), int) else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="YouTube Transcript API",
    description="Fetches timestamped transcripts for YouTube videos",
    version="1.0.0",
)


@app.on_event("startup")
async def validate_configuration():
    """Validate configuration on application startup."""

    logger.info("Validating configuration...")

    validation_result = config_validator.validate_all()

    for warning in validation_result["warnings"]:
        logger.warning("Configuration: %s", warning)

    if not validation_result["valid"]:
        for error in validation_result["errors"]:
            logger.error("Configuration: %s", error)
        logger.critical("Application startup aborted due to configuration errors.")
        raise SystemExit(1)

    logger.info("Configuration validated successfully")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies in the standard failure envelope."""
    logger.info("Rejected request body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request body").model_dump(),
    )


# CORS middleware; credentials cannot be combined with a wildcard origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include routers
app.include_router(transcripts.router, prefix=API_V1_PREFIX, tags=["transcripts"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "YouTube Transcript API", "version": "1.0.0"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
