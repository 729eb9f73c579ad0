# app/deps.py
# Role: Shared application-level dependencies.
#       Provides the Jinja2 templates loader and FastAPI dependencies for
#       the active Settings and the request's resolved AuthState.

"""
Shared dependencies for the agency directory app.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from app.auth import AuthState
from config import Settings

APP_DIR = Path(__file__).resolve().parent

# -------------------------------------------------------------------
# Templates
# -------------------------------------------------------------------

# Jinja2 templates loader (used by all HTML-rendering routes)
templates = Jinja2Templates(directory=str(APP_DIR / "templates"))

# -------------------------------------------------------------------
# Settings / auth dependencies
# -------------------------------------------------------------------

def get_settings(request: Request) -> Settings:
    """
    Settings the app was created with (see main.create_app).

    Typical usage in routes:
        settings: Settings = Depends(get_settings)
    """
    return request.app.state.settings


def get_auth_state(request: Request) -> AuthState:
    """
    AuthState resolved by AuthGateMiddleware for this request.
    Falls back to "not yet determined" if the middleware did not run.
    """
    return getattr(request.state, "auth", None) or AuthState.loading()
