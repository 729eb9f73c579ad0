# app/middleware.py
# Role: Auth gate in front of every route.
#       Resolves the request's AuthState once (stored on request.state.auth) and
#       blocks /api/* and /dashboard* for anyone who is not signed in.
#       Route handlers themselves never check auth.

import logging
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.auth import AuthState, AuthStatus, resolve_auth_state
from config import Settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
DASHBOARD_PREFIX = "/dashboard"

AuthResolver = Callable[[Request, Settings], AuthState]


def _under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


class AuthGateMiddleware(BaseHTTPMiddleware):
    """
    - /api/...       not signed in -> 401 {"error", "details"}
    - /dashboard...  not signed in -> 307 to settings.sign_in_url
    - anything else  passes through (landing, sign-in, health, static)

    A resolver that raises leaves the state undetermined (LOADING), which the
    gate treats the same as signed out.
    """

    def __init__(self, app, settings: Settings, resolver: AuthResolver = resolve_auth_state):
        super().__init__(app)
        self.settings = settings
        self.resolver = resolver

    def _resolve(self, request: Request) -> AuthState:
        try:
            return self.resolver(request, self.settings)
        except Exception as e:
            logger.warning(f"[auth-gate] Could not resolve auth state for {request.url.path}: {e!r}")
            return AuthState.loading()

    async def dispatch(self, request: Request, call_next):
        auth = self._resolve(request)
        request.state.auth = auth

        path = request.url.path
        if auth.status is not AuthStatus.SIGNED_IN:
            if _under(path, API_PREFIX):
                logger.info(f"[auth-gate] Rejected {request.method} {path} ({auth.status.value})")
                return JSONResponse(
                    {"error": "Unauthorized", "details": "Sign in required"},
                    status_code=401,
                )
            if _under(path, DASHBOARD_PREFIX):
                logger.info(f"[auth-gate] Redirecting {path} to sign-in ({auth.status.value})")
                return RedirectResponse(url=self.settings.sign_in_url, status_code=307)

        return await call_next(request)
