import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm.exc import StaleDataError
from starlette.exceptions import HTTPException as StarletteHTTPException

from campaign_studio.api import assets, audiences, auth, brand, campaigns
from campaign_studio.core.config import settings
from campaign_studio.core.database import Base, engine
from campaign_studio.core.errors import AppError
from campaign_studio.services.asset_service import CONFLICT_MESSAGE

from campaign_studio.models import *  # noqa: F401,F403  (register tables)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Campaign Studio API")

# -------------------------
# CORS (Allow Frontend Cookies)
# -------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CLIENT_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------
# Error envelope
# -------------------------
def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message, **extra})


@app.exception_handler(AppError)
def handle_app_error(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
    return _error(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]) or None,
            "message": err.get("msg"),
        }
        for err in exc.errors()
    ]
    return _error(400, "Validation failed", errors=errors)


@app.exception_handler(StarletteHTTPException)
def handle_http_error(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(StaleDataError)
def handle_stale_data(request: Request, exc: StaleDataError):
    return _error(409, CONFLICT_MESSAGE)


@app.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.exception(f"🔥 Unhandled error on {request.method} {request.url.path}")
    return _error(500, "Internal server error")


# -------------------------
# Include Routers
# -------------------------
app.include_router(auth.router)
app.include_router(brand.router)
app.include_router(audiences.router)
app.include_router(campaigns.router)
app.include_router(assets.router)


# -------------------------
# DB INIT
# -------------------------
Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health():
    return {"success": True, "status": "running"}
