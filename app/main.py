# /app/main.py
"""
Main application module for the API.
This is the entry point that initializes the FastAPI app and includes all routes.
"""
import logging
import sys
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.api.router import router
from app.config import get_settings

# Logging setup - direct to stdout
logging.basicConfig(
    level=logging.INFO,
    stream=sys.stdout,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    force=True  # Override any previous configuration
)

logger = logging.getLogger(__name__)

# Initialize FastAPI
app = FastAPI(
    title="Base Profile API",
    description="API for searching Farcaster users and viewing their Base names, tokens and NFTs"
)


@app.on_event("startup")
async def startup_event():
    """Report which upstream providers are configured"""
    settings = get_settings()
    logger.info("=== API STARTING UP ===")
    logger.info(f"Neynar: {'✓' if settings.neynar_api_key else '✗'}")
    logger.info(f"Alchemy ({settings.alchemy_network}): {'✓' if settings.alchemy_api_key else '✗'}")
    logger.info(f"Basename resolver: {'✓' if settings.basename_resolver_url else '✗'}")
    logger.info("=== API READY ===")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed query parameters are a client error, reported as 400."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": "Invalid request parameters", "errors": jsonable_encoder(exc.errors())})


# Root endpoint
@app.get("/")
async def root():
    return {"message": "Base Profile API is running"}

# Include all routes with v1 prefix
app.include_router(router, prefix="/v1")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
