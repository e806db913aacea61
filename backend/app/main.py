from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.routers import invoices, companies, dashboard
from app.config import settings
from app.errors import InvoicingError
import logging
import sys

# Configure logging
logging.basicConfig(
    level=(settings.log_level or "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

# Log startup information
logger.info("="*60)
logger.info("Starting Invoicing API")
logger.info("="*60)
logger.info(f"Database: {settings.database_url.split('@')[-1]}")
logger.info(f"Invoice base prefix: {settings.invoice_base_prefix}-")
logger.info(f"Price rounding step: {settings.price_rounding_step}")
logger.info("="*60)

# Create tables (in production, use migrations)
# Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Invoicing API",
    description="API for numbering, storing and rendering company invoices",
    version="1.0.0"
)


# Parse CORS origins from config
def parse_cors_origins(origins_str: str) -> list:
    """Parse CORS origins string into a list."""
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


all_origins = parse_cors_origins(settings.cors_origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=all_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["*"],
)

# Include routers
app.include_router(invoices.router)
app.include_router(companies.router)
app.include_router(dashboard.router)


@app.get("/")
def root():
    return {"message": "Invoicing API", "version": "1.0.0"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.exception_handler(InvoicingError)
async def invoicing_exception_handler(request: Request, exc: InvoicingError):
    """Render core errors with their context (scope key, submitted/final number)"""
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message} {exc.context}")
    else:
        logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Exception handler to ensure CORS headers are always sent
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler to ensure CORS headers are sent even on errors"""
    logging.error(f"Unhandled exception: {str(exc)}", exc_info=True)

    origin = request.headers.get("origin", "")
    cors_origin = origin if origin in all_origins else "*"

    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {str(exc)}"},
        headers={
            "Access-Control-Allow-Origin": cors_origin,
            "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS, PATCH",
            "Access-Control-Allow-Headers": "*",
            "Access-Control-Allow-Credentials": "true",
        }
    )
