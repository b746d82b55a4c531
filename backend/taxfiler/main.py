"""
Irish Income Tax Filing Assistant

A FastAPI application for estimating and saving Irish personal
income tax returns.

Supports:
- Income tax at 20% / 40% with tax credits
- USC (Universal Social Charge)
- PRSI (Pay Related Social Insurance)
- Saved tax returns per user
- Filing deadlines
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .models import init_db
from .routers import tax_router, tax_returns_router
from .services import supported_years

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Irish Income Tax Filing Assistant",
    description="Calculate Irish income tax, USC and PRSI and manage tax returns",
    version=settings.app_version
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tax_router)
app.include_router(tax_returns_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the API's response envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Invalid request bodies are a 400 with one message per field."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors.append(f"{field}: {error.get('msg')}" if field else error.get("msg"))

    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation Error", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal Server Error"},
    )


@app.on_event("startup")
async def startup():
    """Initialize database on startup."""
    init_db()
    logger.info("Irish Income Tax Filing Assistant v%s started", settings.app_version)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Irish Income Tax Filing Assistant",
        "version": settings.app_version,
        "description": "Calculate Irish income tax, USC and PRSI and manage tax returns",
        "endpoints": {
            "calculate": "/api/tax/calculate",
            "rates": "/api/tax/rates",
            "deadlines": "/api/tax/deadlines",
            "tax_returns": {
                "create": "/api/tax/create",
                "list": "/api/tax/user/{user_id}",
                "detail": "/api/tax/return/{id}",
                "calculation": "/api/tax/return/{id}/calculation"
            }
        },
        "supported_tax_years": supported_years(),
        "tax_rates": {
            "Income Tax": "20% up to €36,800, 40% above",
            "USC": "2% up to €22,920, 4.5% above (none at or below €13,000)",
            "PRSI": "4% of gross income above €18,304"
        },
        "documentation": "/docs"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
