"""Authentication routes and the administrator access guard."""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from errors import AuthFailure, LoginRequired, ValidationFailure
from schemas import LoginForm, parse_form
from services.auth_service import AuthService
from .common import redirect_to, templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

SESSION_ADMIN_KEY = "admin_id"


@dataclass(frozen=True)
class AuthContext:
    """The authenticated administrator of the current request."""
    admin_id: int


def require_admin(request: Request) -> AuthContext:
    """Dependency admitting only requests whose session carries an administrator id."""
    admin_id = request.session.get(SESSION_ADMIN_KEY)
    if not admin_id:
        raise LoginRequired()
    return AuthContext(admin_id=admin_id)


@router.get("/login")
def get_login_page(request: Request, error: Optional[str] = None):
    """Displays the login page."""
    return templates.TemplateResponse(request, "login.html", {"error": error})


@router.post("/login")
async def login(request: Request, db: Session = Depends(get_db)):
    """Checks the submitted credentials and stores the administrator id in the session."""
    try:
        form = parse_form(LoginForm, await request.form())
        admin = AuthService(db).login(form.email, form.password)
    except (AuthFailure, ValidationFailure):
        return redirect_to("/login", error=AuthFailure.flag)

    request.session[SESSION_ADMIN_KEY] = admin.id
    return redirect_to("/dashboard")


@router.get("/logout")
def logout(request: Request):
    """Terminates the administrator session and returns to the login page."""
    try:
        request.session.clear()
    except Exception:
        logger.exception("Could not clear session")
    response = redirect_to("/login")
    response.delete_cookie(key=settings.SESSION_COOKIE)
    return response
