# app/routes_dashboard.py

from fastapi import APIRouter, Request, Depends, HTTPException
from fastapi.responses import RedirectResponse

from .auth import AuthState
from .deps import templates, get_settings, get_auth_state
from config import Settings

router = APIRouter()

# section -> API endpoint feeding its table
DASHBOARD_SECTIONS = {
    "agencies": "/api/agencies",
    "contacts": "/api/contacts",
}


@router.get("/dashboard")
def dashboard_root(settings: Settings = Depends(get_settings)):
    return RedirectResponse(url=settings.dashboard_url, status_code=307)


@router.get("/dashboard/{section}")
def dashboard_page(
    section: str,
    request: Request,
    auth: AuthState = Depends(get_auth_state),
):
    # Layout is a plain container; section.html fills its content block
    if section not in DASHBOARD_SECTIONS:
        raise HTTPException(status_code=404, detail=f"Unknown dashboard section: {section}")

    return templates.TemplateResponse(
        request,
        "dashboard/section.html",
        {
            "user": auth.user,
            "section": section,
            "sections": list(DASHBOARD_SECTIONS),
            "api_url": DASHBOARD_SECTIONS[section],
        },
    )
