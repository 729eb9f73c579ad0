# app/auth.py
"""
Auth state as seen by this app.

Sign-in and sessions belong to the external identity provider. It sits in
front of the app and forwards who the user is in request headers:

- <auth_user_header>: the signed-in identity (absent / empty when signed out)
- <auth_status_header>: "pending" while the provider is still resolving the session
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi import Request

from config import Settings

PENDING_STATUS = "pending"


class AuthStatus(str, Enum):
    LOADING = "loading"
    SIGNED_IN = "signed_in"
    SIGNED_OUT = "signed_out"


@dataclass(frozen=True)
class AuthState:
    is_loaded: bool
    user: Optional[str] = None

    @property
    def status(self) -> AuthStatus:
        if not self.is_loaded:
            return AuthStatus.LOADING
        return AuthStatus.SIGNED_IN if self.user else AuthStatus.SIGNED_OUT

    @classmethod
    def loading(cls) -> "AuthState":
        return cls(is_loaded=False)

    @classmethod
    def signed_in(cls, user: str) -> "AuthState":
        return cls(is_loaded=True, user=user)

    @classmethod
    def signed_out(cls) -> "AuthState":
        return cls(is_loaded=True)


def resolve_auth_state(request: Request, settings: Settings) -> AuthState:
    """
    Read the identity forwarded by the identity provider.
    """
    status = (request.headers.get(settings.auth_status_header) or "").strip().lower()
    if status == PENDING_STATUS:
        return AuthState.loading()

    user = (request.headers.get(settings.auth_user_header) or "").strip()
    if user:
        return AuthState.signed_in(user)

    return AuthState.signed_out()
