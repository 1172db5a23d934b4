"""
FastAPI application for sectools
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__, config
from .routes import recon_routes

# Setup logging
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="sectools API",
    description="Port scanning and DNS reconnaissance",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-API-Key"],
)

app.include_router(recon_routes.router)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": "sectools API",
        "version": __version__,
        "endpoints": [
            "/port?host=&ports=&timeout= - TCP port scan",
            "/dns?domain= - DNS record lookup",
            "/docs - API documentation",
            "/health - Health check",
        ],
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "sectools",
        "authentication_enabled": bool(config.API_KEY),
    }


def run():
    import uvicorn

    if not config.API_KEY:
        logger.warning("API_KEY environment variable is not set. API authentication is disabled.")
    logger.info(f"Starting API server on {config.API_SERVER_HOST}:{config.API_SERVER_PORT}")
    uvicorn.run(app, host=config.API_SERVER_HOST, port=config.API_SERVER_PORT)


if __name__ == "__main__":
    run()
