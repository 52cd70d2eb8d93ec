"""Navigation controller: owns NavigationState and every transition on it.

Screens never touch the state directly. They receive a `ScreenContext` whose
callables route back into the controller. Back navigation follows the fixed
per-screen targets in `domain.registry`; there is no history stack.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from domain.models import AuthSignals, CurrentUser, NavigationState, ScreenContext
from domain.registry import (
    ACTIVE_TAB, COMPLETE_ONBOARDING, LEAVE_SYSTEM_ROUTE, RECOMPUTE, SIGN_OUT,
    Transition, config_for,
)
from domain.screens import ADMIN_SCREENS, SYSTEM_ROUTES, Screen, TabId, parse_screen, tab_for_screen
from services.errors import ApiError, NetworkError, UnknownScreenError

logger = logging.getLogger(__name__)

# ?test=<name> previews: screen, tab to select, role to assume
PREVIEW_ROUTES: Dict[str, Tuple[Screen, Optional[TabId], Optional[str]]] = {
    'team-chat': (Screen.TEAM_CHAT, None, None),
    'teams': (Screen.TEAMS, TabId.TEAMS, 'captain'),
    'team-detail': (Screen.TEAM_DETAIL, None, 'captain'),
    'team-detail-admin': (Screen.TEAM_DETAIL, None, 'admin'),
    'match-detail': (Screen.MATCH_DETAIL, None, 'captain'),
    'ratings': (Screen.RATINGS, None, None),
    'schedule-captain': (Screen.SCHEDULE, None, 'captain'),
    'schedule-admin': (Screen.SCHEDULE, None, 'admin'),
    'schedule-player': (Screen.SCHEDULE, None, 'player'),
    'home': (Screen.HOME, None, 'player'),
}


def detect_system_screen(path: Optional[str]) -> Optional[Screen]:
    if not path:
        return None
    for fragment, screen in SYSTEM_ROUTES:
        if fragment in path:
            return screen
    return None


def resolve_initial_screen(signals: AuthSignals, path: Optional[str] = None,
                           preview: Optional[str] = None) -> Screen:
    """Pick the screen to mount from auth state and URL.

    Priority: preview (when enabled by the caller), reserved paths, loading,
    completed onboarding, incomplete onboarding, anonymous.
    """
    if preview and preview in PREVIEW_ROUTES:
        return PREVIEW_ROUTES[preview][0]
    system_screen = detect_system_screen(path)
    if system_screen is not None:
        return system_screen
    if signals.is_loading:
        return Screen.LOADING
    if signals.is_authenticated and signals.onboarding_completed:
        return Screen.HOME
    if signals.is_authenticated:
        return Screen.ONBOARDING
    return Screen.WELCOME


def _freeze(params: Dict[str, Any]) -> Tuple[Tuple[str, Any], ...]:
    return tuple(sorted((k, v) for k, v in params.items() if v is not None))


def navigate(state: NavigationState, screen, tab=None, **params) -> NavigationState:
    """Pure transition to `screen`, selecting `tab` when given.

    Params a screen requires or keeps are carried over from the current state
    unless passed explicitly; if a required one is still missing, the screen's
    fallback is used.
    """
    target = parse_screen(screen)
    if target is None:
        raise UnknownScreenError(f"Unknown screen: {screen!r}")
    cfg = config_for(target)
    carried = {k: v for k, v in state.params if k in cfg.requires or k in cfg.keeps}
    merged = {**carried, **params}
    missing = [k for k in cfg.requires if merged.get(k) is None]
    if missing and cfg.fallback is not None:
        logger.warning("Screen %s needs %s; falling back to %s",
                       target.value, ", ".join(missing), cfg.fallback.value)
        return navigate(state, cfg.fallback, tab)
    new_tab = TabId(tab) if tab is not None else state.active_tab
    return replace(state, current_screen=target, active_tab=new_tab, params=_freeze(merged))


def back_target(state: NavigationState) -> Optional[Tuple[Screen, Optional[TabId]]]:
    cfg = config_for(state.current_screen)
    if cfg.back is None:
        return None
    if cfg.back == ACTIVE_TAB:
        if state.active_tab in (TabId.SCHEDULE, TabId.TEAMS):
            return Screen(state.active_tab.value), None
        return Screen.HOME, None
    return Screen(cfg.back), cfg.back_tab


class NavigationController:
    """One instance per session. Collaborators are injected so tests can fake them.

    api: object with `complete_onboarding(user_id, sports=, role=, full_name=, phone=)`.
    auth: object with `state()` and `sign_out()`.
    notify: callable(kind, message) for transient toasts.
    """

    def __init__(self, api=None, auth=None, notify: Optional[Callable[[str, str], None]] = None):
        self.api = api
        self.auth = auth
        self.notify = notify or (lambda kind, message: None)
        self.state = NavigationState()
        self._applied: Optional[AuthSignals] = None
        self._dismissed_path: Optional[str] = None

    # --- Initialization effect ---

    @property
    def needs_recompute(self) -> bool:
        return self._applied is None

    def apply_auth(self, signals: AuthSignals, path: Optional[str] = None,
                   preview: Optional[str] = None) -> bool:
        """Re-derive the screen when auth signals changed. Returns True if it ran."""
        if self._applied == signals:
            return False
        self._applied = signals
        if path and path == self._dismissed_path:
            path = None
        screen = resolve_initial_screen(signals, path, preview)
        updates: Dict[str, Any] = {'current_screen': screen, 'params': ()}
        previewing = preview in PREVIEW_ROUTES
        if screen == Screen.HOME and not previewing:
            updates['is_returning_user'] = True
        elif screen == Screen.ONBOARDING:
            updates['is_returning_user'] = False
        if previewing:
            _, tab, role = PREVIEW_ROUTES[preview]
            if tab is not None:
                updates['active_tab'] = tab
            if role is not None:
                updates['user_role'] = role
        self.state = replace(self.state, **updates)
        logger.debug("Routing resolved to %s (%s)", screen.value, signals)
        return True

    def record_onboarding_status(self, completed: bool):
        if self.state.onboarding_completed != completed:
            self.state = replace(self.state, onboarding_completed=completed)

    def record_role(self, user: Optional[CurrentUser]):
        if user is None or self.state.user_role is not None:
            return
        role = 'admin' if user.is_admin else 'captain' if user.is_captain else 'player'
        self.state = replace(self.state, user_role=role)

    # --- Transitions ---

    def navigate_to(self, screen, tab=None, **params):
        self.state = navigate(self.state, screen, tab, **params)
        logger.debug("navigate_to %s (tab=%s)", self.state.current_screen.value, self.state.active_tab.value)

    def go_back(self):
        target = back_target(self.state)
        if target is None:
            return
        screen, tab = target
        self.navigate_to(screen, tab)

    def change_tab(self, tab):
        tab = TabId(tab)
        self.state = replace(self.state, active_tab=tab, current_screen=Screen(tab.value), params=())

    def request_recompute(self):
        """Go to the synthetic loading screen and let the effect pick the destination."""
        self.state = replace(self.state, current_screen=Screen.LOADING, params=())
        self._applied = None

    def complete_sign_in(self):
        self.request_recompute()

    def leave_system_route(self, path: Optional[str]):
        self._dismissed_path = path
        self.request_recompute()

    def complete_onboarding(self, role: str, sports: Sequence[str] = (),
                            profile: Optional[Dict[str, Any]] = None) -> bool:
        """Persist onboarding (role, sports and profile) on the backend; only success unlocks the route home."""
        profile = profile or {}
        self.state = replace(self.state, user_role=role)
        auth_state = self.auth.state() if self.auth is not None else None
        if auth_state is None or auth_state.user is None:
            logger.error("Cannot complete onboarding without a signed-in user")
            self.notify('error', "Please sign in again to finish setup")
            return False
        try:
            self.api.complete_onboarding(auth_state.user.id, sports=list(sports), role=role,
                                         full_name=profile.get('name'), phone=profile.get('phone'))
        except (ApiError, NetworkError) as e:
            logger.error("Failed to save onboarding status: %s", e)
            self.notify('error', "Failed to save your progress")
            return False
        logger.info("Onboarding marked complete for %s", auth_state.user.id)
        self.record_onboarding_status(True)
        return True

    def sign_out(self):
        if self.auth is not None:
            self.auth.sign_out()
        self.state = NavigationState(current_screen=Screen.WELCOME)
        self._applied = None

    def enforce_role_guard(self, user: Optional[CurrentUser]):
        if self.state.current_screen in ADMIN_SCREENS and user is not None and not user.is_admin:
            logger.warning("Non-admin user tried to access admin screen, redirecting to home")
            self.state = replace(self.state, current_screen=Screen.HOME, active_tab=TabId.HOME, params=())

    # --- View wiring ---

    def run(self, transition: Transition, path: Optional[str] = None, **params):
        target = transition.target
        if target == RECOMPUTE:
            self.request_recompute()
        elif target == SIGN_OUT:
            self.sign_out()
        elif target == LEAVE_SYSTEM_ROUTE:
            self.leave_system_route(path)
        elif target == COMPLETE_ONBOARDING:
            self.complete_onboarding(params.get('role') or 'player', params.get('sports') or (),
                                     params.get('profile'))
        else:
            self.navigate_to(target, transition.tab, **params)

    def context(self, user: Optional[CurrentUser] = None, path: Optional[str] = None) -> ScreenContext:
        screen = self.state.current_screen
        cfg = config_for(screen)

        def bind(transition: Transition):
            return lambda **params: self.run(transition, path, **params)

        actions = {name: bind(t) for name, t in cfg.actions.items()}
        is_captain = bool(user and user.is_captain) or self.state.user_role == 'captain'
        is_admin = bool(user and user.is_admin) or self.state.user_role == 'admin'
        return ScreenContext(
            screen=screen,
            title=cfg.title,
            actions=actions,
            labels={name: t.label for name, t in cfg.actions.items()},
            on_back=self.go_back if cfg.show_back and cfg.back is not None else None,
            is_captain=is_captain,
            is_admin=is_admin,
            params=dict(self.state.params),
            user=user,
            captain_only=frozenset(n for n, t in cfg.actions.items() if t.captain_only),
            admin_only=frozenset(n for n, t in cfg.actions.items() if t.admin_only),
        )

    def shell_tab(self) -> TabId:
        """Tab highlighted in the shell: the screen's own tab if it is a tab root."""
        return tab_for_screen(self.state.current_screen) or self.state.active_tab
