"""FastAPI application entry point."""
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from textkit import __version__, errors
from textkit.logging import setup_logging

# Set up logging
logger = setup_logging()

app = FastAPI(
    title="textkit",
    description="String similarity, sorting and puzzle utilities",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(errors.TextkitError, errors.textkit_error_handler)
app.add_exception_handler(RequestValidationError, errors.request_validation_error_handler)
app.add_exception_handler(Exception, errors.generic_exception_handler)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Add request ID and extract gateway headers."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    request.state.upstream_trace_id = request.headers.get("x-request-id")

    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time"] = str(process_time)

    return response


@app.on_event("startup")
async def startup_event():
    """Application startup."""
    logger.info("textkit starting", extra={"version": __version__})


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown."""
    logger.info("textkit shutting down")


# Import routers after app creation to avoid circular imports
from textkit.routers import algorithms, health, similarity, version  # noqa: E402

app.include_router(health.router)
app.include_router(version.router)
app.include_router(similarity.router, prefix="/v1")
app.include_router(algorithms.router, prefix="/v1")
