# routes_root.py
"""
Root / basic endpoints (landing, sign-in, health).
"""

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from app.auth import AuthState
from app.deps import templates, get_settings, get_auth_state
from app.services.landing import LandingRedirector
from config import Settings

router = APIRouter()

# Seconds before the placeholder page asks again
PLACEHOLDER_REFRESH_SECONDS = 1


@router.get("/")
def landing(
    request: Request,
    settings: Settings = Depends(get_settings),
    auth: AuthState = Depends(get_auth_state),
):
    """
    Landing page: redirect to the dashboard (signed in) or to sign-in (signed out).

    While the identity provider has not decided yet, show a "Redirecting..."
    placeholder that reloads itself instead of navigating.
    """
    targets = []
    redirector = LandingRedirector(
        navigate=targets.append,
        dashboard_url=settings.dashboard_url,
        sign_in_url=settings.sign_in_url,
    )
    redirector.observe(auth)

    if targets:
        return RedirectResponse(url=targets[0], status_code=307)

    return templates.TemplateResponse(
        request,
        "redirecting.html",
        {"refresh_seconds": PLACEHOLDER_REFRESH_SECONDS},
    )


@router.get("/sign-in", response_class=HTMLResponse)
def sign_in_page(request: Request):
    """
    Sign-in itself is handled by the identity provider; this page only
    tells the user where to go.
    """
    return templates.TemplateResponse(request, "sign_in.html", {})


@router.get("/health")
def health():
    return {"status": "ok"}
