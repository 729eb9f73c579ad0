"""
Tests for AuthGateMiddleware, on a small app of its own so the gate is
checked independently of the real routes.
"""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from app.auth import AuthState, AuthStatus, resolve_auth_state
from app.middleware import AuthGateMiddleware
from config import Settings


def build_client(resolver=resolve_auth_state, settings=None) -> TestClient:
    settings = settings or Settings()
    app = FastAPI()
    app.add_middleware(AuthGateMiddleware, settings=settings, resolver=resolver)

    @app.get("/api/thing")
    def api_thing():
        return {"ok": True}

    @app.get("/dashboard/thing")
    def dashboard_thing():
        return {"ok": True}

    @app.get("/apiary")
    def apiary():
        return {"ok": True}

    @app.get("/whoami")
    def whoami(request: Request):
        auth = request.state.auth
        return {"status": auth.status.value, "user": auth.user}

    return TestClient(app)


# ============================================================================
# Resolving the auth state
# ============================================================================

@pytest.mark.parametrize(
    "headers, status, user",
    [
        ({}, "signed_out", None),
        ({"X-Auth-User": "user_1"}, "signed_in", "user_1"),
        ({"X-Auth-User": "   "}, "signed_out", None),
        ({"X-Auth-Status": "pending"}, "loading", None),
        ({"X-Auth-Status": "Pending", "X-Auth-User": "user_1"}, "loading", None),
    ],
)
def test_state_is_resolved_from_headers(headers, status, user):
    res = build_client().get("/whoami", headers=headers)
    assert res.json() == {"status": status, "user": user}


def test_custom_header_names():
    settings = Settings(auth_user_header="X-Forwarded-User")
    client = build_client(settings=settings)

    assert client.get("/api/thing", headers={"X-Forwarded-User": "u"}).status_code == 200
    assert client.get("/api/thing", headers={"X-Auth-User": "u"}).status_code == 401


def test_auth_state_statuses():
    assert AuthState.loading().status is AuthStatus.LOADING
    assert AuthState.signed_out().status is AuthStatus.SIGNED_OUT
    assert AuthState.signed_in("u").status is AuthStatus.SIGNED_IN


# ============================================================================
# Gate decisions
# ============================================================================

def test_signed_in_passes_everywhere():
    client = build_client()
    headers = {"X-Auth-User": "user_1"}

    assert client.get("/api/thing", headers=headers).json() == {"ok": True}
    assert client.get("/dashboard/thing", headers=headers).json() == {"ok": True}


def test_signed_out_api_gets_401():
    res = build_client().get("/api/thing")
    assert res.status_code == 401
    assert res.json() == {"error": "Unauthorized", "details": "Sign in required"}


def test_signed_out_dashboard_redirects_to_sign_in():
    res = build_client().get("/dashboard/thing", follow_redirects=False)
    assert res.status_code == 307
    assert res.headers["location"] == "/sign-in"


def test_custom_sign_in_url():
    client = build_client(settings=Settings(sign_in_url="/login"))
    res = client.get("/dashboard/thing", follow_redirects=False)
    assert res.headers["location"] == "/login"


def test_pending_state_is_not_let_through():
    res = build_client().get("/api/thing", headers={"X-Auth-Status": "pending", "X-Auth-User": "u"})
    assert res.status_code == 401


def test_public_paths_are_not_gated():
    client = build_client()
    assert client.get("/apiary").status_code == 200
    assert client.get("/whoami").status_code == 200


def test_resolver_failure_counts_as_undetermined():
    def broken(request, settings):
        raise RuntimeError("provider unreachable")

    client = build_client(resolver=broken)

    assert client.get("/api/thing").status_code == 401
    assert client.get("/whoami").json() == {"status": "loading", "user": None}
