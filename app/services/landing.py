# app/services/landing.py
#
# Landing Redirector
# Waits for the auth state to be determined, then navigates exactly once:
# to the dashboard when there is an identity, otherwise to sign-in.

import logging
from typing import Callable, Optional

from app.auth import AuthState, AuthStatus

logger = logging.getLogger(__name__)


class LandingRedirector:
    """
    One-shot redirect driven by auth state updates.

    observe() may be called any number of times (every time the state is
    re-delivered); navigate() is called at most once per instance.
    """

    def __init__(
        self,
        navigate: Callable[[str], None],
        dashboard_url: str = "/dashboard/agencies",
        sign_in_url: str = "/sign-in",
    ):
        self._navigate = navigate
        self.dashboard_url = dashboard_url
        self.sign_in_url = sign_in_url
        self.navigated_to: Optional[str] = None

    @property
    def has_navigated(self) -> bool:
        return self.navigated_to is not None

    def target_for(self, state: AuthState) -> Optional[str]:
        if state.status is AuthStatus.LOADING:
            return None
        if state.status is AuthStatus.SIGNED_IN:
            return self.dashboard_url
        return self.sign_in_url

    def observe(self, state: AuthState) -> Optional[str]:
        """
        Feed the latest auth state. Returns the target on the call that
        navigates, None otherwise.
        """
        if self.has_navigated:
            return None

        target = self.target_for(state)
        if target is None:
            return None

        self.navigated_to = target
        logger.debug(f"[landing] {state.status.value} -> {target}")
        self._navigate(target)
        return target
