"""Auth-dependent effects, run once per script run before anything renders.

Order is fixed by data dependency: the user is synced to the backend, then
its onboarding status is fetched, then the controller routes. A failed step
leaves the later ones waiting (the loading screen stays up) until the user
asks for a retry.
"""
from __future__ import annotations
import logging
import time
from typing import Callable, Optional

from domain.constants import CURRENT_USER_CACHE_SECONDS
from domain.models import AuthSignals, AuthState, CurrentUser, current_user_from_payload
from services.errors import ApiError, NetworkError, NotFoundError
from services.navigation import NavigationController

logger = logging.getLogger(__name__)


class AppSession:
    def __init__(self, api, auth, notify: Optional[Callable[[str, str], None]] = None,
                 clock: Callable[[], float] = time.time):
        self.api = api
        self.auth = auth
        self.notify = notify or (lambda kind, message: None)
        self.clock = clock
        self.controller = NavigationController(api=api, auth=auth, notify=self.notify)
        self.synced_user_id: Optional[str] = None
        self.current_user: Optional[CurrentUser] = None
        self._fetched_at = 0.0
        self.last_error: Optional[str] = None

    # --- Effects ---

    def _sync_user(self, auth_state: AuthState) -> bool:
        user = auth_state.user
        if self.synced_user_id == user.id:
            return True
        try:
            self.api.sync_user(user.id, user.email, user.display_name)
        except (ApiError, NetworkError) as e:
            logger.warning("Failed to sync user %s: %s", user.id, e)
            self._fail("Could not reach the league server")
            return False
        logger.info("User synced to backend: %s", user.id)
        self.synced_user_id = user.id
        return True

    def _load_current_user(self, auth_state: AuthState) -> bool:
        user = auth_state.user
        fresh = (self.current_user is not None and self.current_user.id == user.id
                 and self.clock() - self._fetched_at < CURRENT_USER_CACHE_SECONDS)
        if fresh:
            return True
        try:
            data = self.api.fetch_me(user.id)
        except NotFoundError:
            logger.warning("User %s not found in backend (404); signing out", user.id)
            self.notify('warning', "Your session is out of date. Please sign in again.")
            self.reset()
            self.controller.sign_out()
            return False
        except (ApiError, NetworkError) as e:
            logger.warning("Failed to fetch current user %s: %s", user.id, e)
            self._fail("Could not load your profile")
            return False
        self.current_user = current_user_from_payload(user, data)
        self._fetched_at = self.clock()
        self.controller.record_onboarding_status(self.current_user.onboarding_completed)
        self.controller.record_role(self.current_user)
        return True

    def _fail(self, message: str):
        # One toast per failure; retry clears it
        if self.last_error is None:
            self.notify('error', message)
        self.last_error = message

    def signals(self, auth_state: AuthState) -> AuthSignals:
        resolving = auth_state.is_authenticated and (
            self.current_user is None or self.current_user.id != auth_state.user.id)
        return AuthSignals(
            is_loading=auth_state.is_loading or resolving,
            is_authenticated=auth_state.is_authenticated,
            user_id=auth_state.user.id if auth_state.user else None,
            onboarding_completed=self.controller.state.onboarding_completed,
        )

    def refresh(self, path: Optional[str] = None, preview: Optional[str] = None) -> AuthSignals:
        """Run sync -> fetch status -> route for the current auth state."""
        if self.controller.needs_recompute:
            self.last_error = None
        auth_state = self.auth.state()
        # Bearer token handed over by the identity provider, if any
        self.api.set_token(auth_state.user.user_metadata.get('access_token') if auth_state.user else None)
        if auth_state.is_authenticated and not auth_state.is_loading and self.last_error is None:
            if self._sync_user(auth_state):
                self._load_current_user(auth_state)
            auth_state = self.auth.state()
        if not auth_state.is_authenticated and self.current_user is not None:
            self.reset()
        signals = self.signals(auth_state)
        self.controller.apply_auth(signals, path, preview)
        self.controller.enforce_role_guard(self.current_user)
        return signals

    def reset(self):
        self.synced_user_id = None
        self.current_user = None
        self._fetched_at = 0.0
        self.last_error = None
        self.controller.record_onboarding_status(False)
