from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Callable, Tuple
import datetime as _dt

from domain.screens import Screen, TabId


def _now_iso():
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: str
    user_metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.user_metadata.get('full_name') or self.email or 'User'


@dataclass(frozen=True)
class AuthState:
    """Snapshot supplied by the auth collaborator. Read-only for the router."""
    user: Optional[AuthUser] = None
    is_loading: bool = False
    is_authenticated: bool = False


@dataclass
class CurrentUser:
    """Backend view of the signed-in user (POST /auth/me)."""
    id: str
    email: str
    display_name: str
    roles: List[str] = field(default_factory=list)
    onboarding_completed: bool = False
    fetched_at: str = field(default_factory=_now_iso)

    @property
    def is_admin(self) -> bool:
        return 'admin' in self.roles

    @property
    def is_captain(self) -> bool:
        return 'captain' in self.roles


def current_user_from_payload(auth_user: AuthUser, data: Dict[str, Any]) -> CurrentUser:
    """Build a CurrentUser from the /auth/me body, tolerating missing keys."""
    roles = data.get('roles') or []
    return CurrentUser(
        id=auth_user.id,
        email=auth_user.email or '',
        display_name=data.get('displayName') or auth_user.user_metadata.get('full_name') or 'User',
        roles=[str(r).lower() for r in roles],
        onboarding_completed=bool(data.get('onboardingCompleted', False)),
    )


@dataclass(frozen=True)
class AuthSignals:
    """Inputs whose change re-runs initial routing. Screen changes are not part of it."""
    is_loading: bool
    is_authenticated: bool
    user_id: Optional[str]
    onboarding_completed: bool


@dataclass(frozen=True)
class NavigationState:
    current_screen: Screen = Screen.LOADING
    active_tab: TabId = TabId.HOME
    is_returning_user: bool = False
    user_role: Optional[str] = None  # player | captain | admin
    onboarding_completed: bool = False
    params: Tuple[Tuple[str, Any], ...] = ()

    def param(self, key: str, default=None):
        return dict(self.params).get(key, default)


@dataclass
class ScreenContext:
    """What a mounted view gets: transition callables and role flags, nothing writable."""
    screen: Screen
    title: Optional[str]
    actions: Dict[str, Callable[..., None]]
    labels: Dict[str, str]
    on_back: Optional[Callable[[], None]] = None
    is_captain: bool = False
    is_admin: bool = False
    params: Dict[str, Any] = field(default_factory=dict)
    user: Optional[CurrentUser] = None
    captain_only: frozenset = frozenset()
    admin_only: frozenset = frozenset()

    def action(self, name: str) -> Callable[..., None]:
        return self.actions[name]

    def visible_actions(self) -> List[str]:
        """Action names this user should see; hiding is the view's job, not the router's."""
        names = []
        for name in self.actions:
            if name in self.captain_only and not self.is_captain:
                continue
            if name in self.admin_only and not self.is_admin:
                continue
            names.append(name)
        return names
