"""
FastAPI Application Entry Point

Integrates:
  - Stream Chat custom command webhook (/ticket)
  - Health checks
  - Middleware for logging & error handling

Run: python main.py
  or uvicorn main:app --reload --host localhost --port 3100
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from config import StreamConfig, get_config
from transport.stream.security import SignatureVerificationError
from transport.stream.webhook import router as ticket_router

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    config = get_config()
    logger.info("=" * 60)
    logger.info("Custom Command Handler starting up...")
    logger.info(f"Listening at: http://{config.host}:{config.port}")
    logger.info(f"Stream API URL: {config.base_url or '(default)'}")
    logger.info(f"Environment: {config.environment}")
    missing = config.validate()
    if missing:
        logger.warning(
            f"Missing required environment variables: {', '.join(missing)}; "
            "all webhooks will be rejected"
        )
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Custom Command Handler shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Ticket Command Webhook",
    description="Stream Chat custom command handler for /ticket",
    version="1.0.0",
    lifespan=lifespan,
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


@app.exception_handler(SignatureVerificationError)
async def signature_error_handler(request: Request, exc: SignatureVerificationError):
    """Unauthorized, no body."""
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


# Include routers
app.include_router(ticket_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready(config: StreamConfig = Depends(get_config)):
    """Readiness health check (Kubernetes readiness probe)."""
    missing = config.validate()
    if missing:
        return {"status": "not_ready", "reason": f"missing: {', '.join(missing)}"}
    return {"status": "ready"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Ticket Command Webhook",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "ticket_command": "POST /ticket",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
    )
