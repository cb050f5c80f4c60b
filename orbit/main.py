import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from orbit.config import get_settings
from orbit.core.logging import configure_logging

# IMPORT ROUTERS
from orbit.routers.health import router as health_router
from orbit.routers.questions import router as questions_router
from orbit.routers.profiles import router as profiles_router
from orbit.routers.results import router as results_router
from orbit.routers.assessments import router as assessments_router
from orbit.routers.assessments import validation_exception_handler

settings = get_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Questions"},
    {"name": "Profiles"},
    {"name": "Results"},
    {"name": "Assessments"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)                                       # Health
app.include_router(questions_router, prefix=settings.API_V1_PREFIX)     # Questions
app.include_router(profiles_router, prefix=settings.API_V1_PREFIX)      # Profiles
app.include_router(results_router, prefix=settings.API_V1_PREFIX)       # Results
app.include_router(assessments_router, prefix=settings.API_V1_PREFIX)   # Assessments


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health",
    }


logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started in {settings.APP_ENV} mode")
