"""
VetTriage - Guided Veterinary Triage

Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .exceptions import NotFoundError, ValidationError
from .store import Store
from .routers import (
    pets_router,
    triage_router,
    analyses_router,
    resources_router,
    care_tips_router
)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    print(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    Store.connect()
    
    yield
    
    # Shutdown
    Store.disconnect()
    print("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"]
)


# Trace Middleware
@app.middleware("http")
async def trace_middleware(request: Request, call_next):
    if settings.DEBUG:
        print(f"DEBUG: INCOMING {request.method} {request.url.path}")
    response = await call_next(request)
    if settings.DEBUG:
        print(f"DEBUG: OUTGOING {request.method} {request.url.path} -> {response.status_code}")
    return response


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": exc.detail, "issues": exc.issues}
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.detail}
    )


# Global error handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    error_detail = str(exc)
    print(f"ERROR: {request.method} {request.url.path}: {error_detail}")
    return JSONResponse(
        status_code=500,
        content={"detail": error_detail}
    )


# Include routers
app.include_router(pets_router)
app.include_router(triage_router)
app.include_router(analyses_router)
app.include_router(resources_router)
app.include_router(care_tips_router)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - health check."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "healthy",
        "docs": "/docs"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "store": "ready" if Store.roster is not None else "empty",
        "classifier": Store.classifier.name if Store.classifier else None,
        "version": settings.APP_VERSION
    }


# Entry point for running directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "vettriage.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
