"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from reservasport.api import admin, availability, reservations
from reservasport.core.clock import iso_timestamp
from reservasport.core.config import settings
from reservasport.core.exceptions import ReservaSportError, StoreError
from reservasport.core.store import get_store

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting ReservaSport backend")
    logger.info(f"Debug mode: {settings.DEBUG}")

    store = app.dependency_overrides.get(get_store, get_store)()
    store.initialize()
    logger.info(f"Using data file {store.path}")

    yield

    # Shutdown
    logger.info("Shutting down ReservaSport backend")


# Create FastAPI app
app = FastAPI(
    title="ReservaSport",
    description="Court availability and reservations with an admin panel API",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(availability.router)
app.include_router(reservations.router)
app.include_router(admin.router)


@app.exception_handler(ReservaSportError)
async def reservasport_error_handler(request: Request, exc: ReservaSportError):
    """Render domain errors as {"error": message}."""
    if isinstance(exc, StoreError):
        logger.error(f"Store failure on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and parameters are client errors."""
    logger.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Solicitud inválida."})


@app.get("/api/health")
async def health():
    """Health check endpoint."""
    return {
        "ok": True,
        "time": iso_timestamp(),
    }


def run():
    """Run the API with uvicorn."""
    uvicorn.run(
        "reservasport.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
