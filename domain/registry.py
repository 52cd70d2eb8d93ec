"""Screen registry: chrome and callback wiring per screen.

Pure configuration. The controller reads it to build each view's context; the
views themselves are mapped to screens in `app.SCREEN_VIEWS`.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from domain.screens import Screen, TabId

# Back target meaning "the schedule/teams tab the user came from, else home"
ACTIVE_TAB = "@active-tab"

# Special action targets handled by the controller rather than plain navigation
RECOMPUTE = "@recompute"
SIGN_OUT = "@sign-out"
COMPLETE_ONBOARDING = "@complete-onboarding"
LEAVE_SYSTEM_ROUTE = "@leave-system-route"


@dataclass(frozen=True)
class Transition:
    target: Union[Screen, str]
    tab: Optional[TabId] = None
    label: str = ""
    captain_only: bool = False
    admin_only: bool = False


@dataclass(frozen=True)
class ScreenConfig:
    title: Optional[str] = None
    shell: bool = True
    show_back: bool = False
    back: Union[Screen, str, None] = None
    back_tab: Optional[TabId] = None
    actions: Dict[str, Transition] = field(default_factory=dict)
    requires: Tuple[str, ...] = ()
    # Params picked up from the screen being left, e.g. when coming back from a child screen
    keeps: Tuple[str, ...] = ()
    fallback: Optional[Screen] = None


def _go(target, label, tab=None, **flags) -> Transition:
    return Transition(target=target, tab=tab, label=label, **flags)


def _detail(title, actions=None, back=Screen.HOME, back_tab=TabId.HOME, **kw) -> ScreenConfig:
    return ScreenConfig(title=title, shell=True, show_back=True, back=back,
                        back_tab=back_tab, actions=actions or {}, **kw)


SCREEN_REGISTRY: Dict[Screen, ScreenConfig] = {
    # --- System / pre-auth (no tab shell) ---
    Screen.LOADING: ScreenConfig(shell=False, actions={
        "on_retry": _go(RECOMPUTE, "Retry"),
    }),
    Screen.OAUTH_CALLBACK: ScreenConfig(shell=False, actions={
        "on_continue": _go(LEAVE_SYSTEM_ROUTE, "Continue to app"),
    }),
    Screen.DEBUG: ScreenConfig(title="Debug", shell=False, actions={
        "on_recompute": _go(RECOMPUTE, "Re-run routing"),
        "on_exit": _go(LEAVE_SYSTEM_ROUTE, "Back to app"),
    }),
    Screen.WELCOME: ScreenConfig(shell=False, actions={
        "on_sign_in": _go(Screen.SIGN_IN, "Sign in"),
        "on_sign_up": _go(Screen.SIGN_UP, "Create account"),
    }),
    Screen.SIGN_IN: ScreenConfig(title="Sign in", shell=False, show_back=True, back=Screen.WELCOME, actions={
        "on_complete": _go(RECOMPUTE, "Sign in"),
    }),
    Screen.SIGN_UP: ScreenConfig(title="Create account", shell=False, show_back=True, back=Screen.WELCOME, actions={
        "on_complete": _go(RECOMPUTE, "Sign up"),
    }),
    Screen.ONBOARDING: ScreenConfig(title="Get started", shell=False, actions={
        "on_complete": _go(COMPLETE_ONBOARDING, "Finish"),
    }),

    # --- Tab roots ---
    Screen.HOME: ScreenConfig(shell=True, actions={
        "on_view_match": _go(Screen.MATCH_DETAIL, "Next match"),
        "on_view_all_schedule": _go(Screen.SCHEDULE, "Full schedule", tab=TabId.SCHEDULE),
        "on_view_ratings": _go(Screen.RATINGS, "Ratings", tab=TabId.RATINGS),
        "on_book_court": _go(Screen.COURT_BOOKING, "Book a court", captain_only=True),
        "on_view_waitlist": _go(Screen.WAITLIST, "Waitlist"),
        "on_view_analytics": _go(Screen.ANALYTICS, "Team analytics", captain_only=True),
        "on_set_availability": _go(Screen.AVAILABILITY, "Set availability"),
        "on_view_standings": _go(Screen.STANDINGS, "Standings"),
    }),
    Screen.SCHEDULE: _detail("Schedule", {
        "on_view_match": _go(Screen.MATCH_DETAIL, "Match details"),
    }),
    Screen.TEAMS: _detail("Teams", {
        "on_view_team": _go(Screen.TEAM_DETAIL, "View team"),
        "on_open_chat": _go(Screen.TEAM_CHAT, "Team chat"),
    }),
    Screen.RATINGS: _detail("Ratings"),
    Screen.MORE: _detail("More", {
        "on_view_team": _go(Screen.TEAM_DETAIL, "My team", tab=TabId.TEAMS),
        "on_manage_roster": _go(Screen.TEAM_DETAIL, "Manage roster", tab=TabId.TEAMS, captain_only=True),
        "on_set_lineups": _go(Screen.MATCH_DETAIL, "Set lineups", captain_only=True),
        "on_view_analytics": _go(Screen.ANALYTICS, "Team analytics", captain_only=True),
        "on_view_team_chat": _go(Screen.TEAM_CHAT, "Team chat"),
        "on_view_practice_scheduler": _go(Screen.PRACTICE_SCHEDULER, "Practice scheduler"),
        "on_view_my_standings": _go(Screen.MY_STANDINGS, "My standings"),
        "on_view_division_standings": _go(Screen.DIVISION_STANDINGS, "Division standings"),
        "on_view_personal_stats": _go(Screen.PERSONAL_STATS, "My stats"),
        "on_view_achievements": _go(Screen.ACHIEVEMENTS, "Achievements"),
        "on_view_player_directory": _go(Screen.PLAYER_DIRECTORY, "Player directory"),
        "on_view_photo_gallery": _go(Screen.PHOTO_GALLERY, "Photo gallery"),
        "on_view_dues_payment": _go(Screen.DUES_PAYMENT, "Dues & payments"),
        "on_view_notifications": _go(Screen.NOTIFICATIONS, "Notifications"),
        "on_view_settings": _go(Screen.SETTINGS, "Preferences"),
        "on_view_feedback": _go(Screen.FEEDBACK, "Send feedback"),
        "on_view_association_admin": _go(Screen.ADMIN, "Association admin", admin_only=True),
        "on_sign_out": _go(SIGN_OUT, "Sign out"),
    }),

    # --- Detail screens ---
    Screen.TEAM_DETAIL: _detail("Team Details", {
        "on_view_match": _go(Screen.MATCH_DETAIL, "Upcoming match"),
        "on_view_team_chat": _go(Screen.TEAM_CHAT, "Team chat"),
        "on_view_team_report": _go(Screen.TEAM_SEASON_REPORT, "Season report"),
    }, back=Screen.TEAMS, back_tab=TabId.TEAMS, keeps=("team_id",)),
    Screen.MATCH_DETAIL: _detail("Match Details", back=ACTIVE_TAB, back_tab=None),
    Screen.COURT_BOOKING: _detail("Court Booking"),
    Screen.WAITLIST: _detail("Waitlist"),
    Screen.ANALYTICS: _detail("Analytics"),
    Screen.NOTIFICATIONS: _detail("Notifications"),
    Screen.AVAILABILITY: _detail("Availability"),
    Screen.STANDINGS: _detail("Standings"),
    Screen.ACHIEVEMENTS: _detail("Achievements"),
    Screen.PERSONAL_STATS: _detail("Personal Stats", {
        "on_view_achievements": _go(Screen.ACHIEVEMENTS, "Achievements"),
    }),
    Screen.PLAYER_DIRECTORY: _detail("Player Directory"),
    Screen.PHOTO_GALLERY: _detail("Photo Gallery"),
    Screen.DUES_PAYMENT: _detail("Dues Payment"),
    Screen.TEAM_CHAT: _detail("Team Chat"),
    Screen.PRACTICE_SCHEDULER: _detail("Practice Scheduler"),
    Screen.FEEDBACK: _detail("Feedback"),
    Screen.SETTINGS: _detail("Settings"),
    Screen.DIVISION_STANDINGS: _detail("Division Standings", {
        "on_team_click": _go(Screen.TEAM_SEASON_REPORT, "Team report"),
    }),
    Screen.TEAM_SEASON_REPORT: _detail(
        "Team Season Report", back=Screen.TEAM_DETAIL, back_tab=None,
        requires=("team_id",), fallback=Screen.DIVISION_STANDINGS),
    Screen.MY_STANDINGS: _detail("My Standings", {
        "on_view_full_standings": _go(Screen.DIVISION_STANDINGS, "Full standings"),
        "on_view_team_report": _go(Screen.TEAM_SEASON_REPORT, "Team report"),
    }),

    # --- Back-office ---
    Screen.ADMIN: ScreenConfig(title="Association Admin", shell=False, actions={
        "on_exit": _go(Screen.MORE, "Exit admin", tab=TabId.MORE),
    }),
}


def missing_screens():
    return [s for s in Screen if s not in SCREEN_REGISTRY]


def config_for(screen: Screen) -> ScreenConfig:
    return SCREEN_REGISTRY[screen]


if missing_screens():  # every Screen needs an entry
    raise RuntimeError(f"Screen registry incomplete: {missing_screens()}")

# Screens rendered inside the tabbed shell
TAB_SCREENS = frozenset(s for s, cfg in SCREEN_REGISTRY.items() if cfg.shell)
