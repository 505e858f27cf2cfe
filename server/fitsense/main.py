import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from fitsense import __version__
from fitsense.config import get_settings
from fitsense.routers import fitness, preferences

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = get_settings()

# Form messages per field (snake_case and camelCase names)
FIELD_ERROR_MESSAGES = {
    "weight": "Please enter a valid weight",
    "height": "Please enter a valid height",
    "activity_level": "Please select an activity level",
    "activityLevel": "Please select an activity level",
}

app = FastAPI(title="FitSense API", version=__version__)

app.add_middleware(GZipMiddleware, minimum_size=1000)

# Session cookie doubles as the per-browser preference store
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie="fitsense_session",
    max_age=settings.SESSION_MAX_AGE,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(fitness.router)
app.include_router(preferences.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[-1]) if loc else "body"
        errors.setdefault(field, FIELD_ERROR_MESSAGES.get(field, error.get("msg", "Invalid value")))

    logger.info(f"Rejected {request.url.path}: {errors}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "errors": errors},
    )


@app.get("/")
def home():
    return {"message": "FitSense API Running"}


@app.get("/health")
def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy", "advice_service": "configured" if settings.GROQ_API_KEY else "fallback"}
