# main.py
# Role: Application entry point for the agency directory.
#       Builds the FastAPI app, configures logging, installs the auth gate,
#       mounts static assets, and registers all route modules.
#       Run with: uvicorn main:create_app --factory

"""
Main FastAPI app for the agency directory.

Here we only:
- load settings and set up logging
- create the FastAPI app
- install the auth gate middleware
- set up static files
- include route modules
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.deps import APP_DIR
from app.logging_setup import setup_logging
from app.middleware import AuthGateMiddleware
from app.routes_api import router as api_router
from app.routes_dashboard import router as dashboard_router
from app.routes_root import router as root_router
from config import Settings, load_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the app. Settings default to the environment (.env / env vars);
    tests pass their own.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level_value)

    # FastAPI application instance
    app = FastAPI(title="Agency Directory")
    app.state.settings = settings

    # Every request goes through the auth gate first
    app.add_middleware(AuthGateMiddleware, settings=settings)

    # Serve static files (JS) from /static
    # Maps URL path "/static/*" to files under app/static/
    app.mount("/static", StaticFiles(directory=str(APP_DIR / "static")), name="static")

    # -------------------------------------------------------------------
    # Include routers
    # -------------------------------------------------------------------

    # Landing redirect, sign-in page, health check
    app.include_router(root_router)

    # CSV-backed JSON endpoints (/api/agencies, /api/contacts)
    app.include_router(api_router)

    # Dashboard shell pages
    app.include_router(dashboard_router)

    return app

#   uvicorn main:create_app --factory
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:create_app", factory=True, host="127.0.0.1", port=8000)
