import logging
import traceback
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings

# Setup Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Car rental & shuttle booking backend (Optimrental)",
    docs_url="/docs",
    redoc_url="/redoc",
)

# --------------------------------------------------------------------------
# CORS Middleware (must be registered first)
# --------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------------------------------------------------
# Adapter Initialization (Startup Event)
# --------------------------------------------------------------------------
from app.services.auth_service import seed_mock_admin


@app.on_event("startup")
async def on_startup():
    logger.info(
        f"Adapters: store={settings.STORE_ADAPTER_TYPE}, "
        f"auth={settings.AUTH_ADAPTER_TYPE}, images={settings.IMAGE_HOST_ADAPTER_TYPE}"
    )
    if settings.STORE_ADAPTER_TYPE == "supabase" and not settings.SUPABASE_URL:
        logger.error("STORE_ADAPTER_TYPE is 'supabase' but SUPABASE_URL is not set")
    await seed_mock_admin()

# --------------------------------------------------------------------------
# Global Exception Handler (JSON body even on 500)
# --------------------------------------------------------------------------
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    error_msg = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(f"ERROR OCCURRED AT {request.url.path}:\n{error_msg}")

    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal Server Error",
            "detail": str(exc),
            "path": str(request.url)
        }
    )

# --------------------------------------------------------------------------
# Basic Routes
# --------------------------------------------------------------------------
@app.get("/")
async def root():
    return {
        "message": "Optimrental API is running",
        "version": settings.APP_VERSION,
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "adapters": {
            "store": settings.STORE_ADAPTER_TYPE,
            "auth": settings.AUTH_ADAPTER_TYPE,
            "images": settings.IMAGE_HOST_ADAPTER_TYPE,
        }
    }

# --------------------------------------------------------------------------
# API Routers
# --------------------------------------------------------------------------
from app.api.v1 import api_router
from app.api.v1.bookings import router as bookings_router

app.include_router(api_router, prefix="/api/v1")

# The booking form posts to the unversioned path
app.include_router(bookings_router, prefix="/api/bookings", tags=["Bookings - Public Form"])
