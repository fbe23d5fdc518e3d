"""Main application entry point and page routes for the Apêgo admin backend."""
import logging
import os
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.orm import Session
from starlette.middleware.sessions import SessionMiddleware

import models
import pricing
from config import STATIC_DIR, settings
from database import engine, get_db
from errors import AppError, LoginRequired, NotFound
from routers import auth, properties, rentals
from routers.auth import AuthContext, require_admin
from routers.common import templates
from services.property_service import PropertyService
from storage import UploadStorage, get_storage

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

pricing.check_mode(settings.PRICING_MODE)
models.Base.metadata.create_all(bind=engine)
os.makedirs(settings.UPLOAD_FOLDER, exist_ok=True)

app = FastAPI(title=settings.PROJECT_NAME)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    same_site="lax",
)

app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_FOLDER), name="uploads")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

app.include_router(auth.router)
app.include_router(properties.router)
app.include_router(rentals.router)


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    return RedirectResponse(url="/login", status_code=303)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.error("Unhandled %s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    if isinstance(exc, NotFound):
        return PlainTextResponse("Not found.", status_code=404)
    return PlainTextResponse("An error occurred on the server.", status_code=500)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception while processing %s %s", request.method, request.url.path)
    return PlainTextResponse("An error occurred on the server.", status_code=500)


@app.get("/")
def home(auth: AuthContext = Depends(require_admin)):
    """Sends the administrator to the dashboard."""
    return RedirectResponse(url="/dashboard", status_code=303)


@app.get("/dashboard")
def dashboard(
        request: Request,
        success: Optional[str] = None,
        error: Optional[str] = None,
        db: Session = Depends(get_db),
        storage: UploadStorage = Depends(get_storage),
        auth: AuthContext = Depends(require_admin),
):
    """Dashboard with property counts and the new-property form."""
    stats = PropertyService(db, storage).stats()
    return templates.TemplateResponse(request, "dashboard.html", {
        "success": success,
        "error": error,
        "totalCasas": stats.total_properties,
        "casasAlugadas": stats.rented_properties,
    })
