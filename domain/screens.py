"""Screen and tab identifiers.

The screen set is closed: anything the router mounts is a member of `Screen`.
"""
from enum import Enum
from typing import Optional, Tuple


class Screen(str, Enum):
    LOADING = "loading"
    OAUTH_CALLBACK = "oauth-callback"
    DEBUG = "debug"
    WELCOME = "welcome"
    SIGN_IN = "sign-in"
    SIGN_UP = "sign-up"
    ONBOARDING = "onboarding"
    HOME = "home"
    SCHEDULE = "schedule"
    TEAMS = "teams"
    TEAM_DETAIL = "team-detail"
    RATINGS = "ratings"
    MORE = "more"
    MATCH_DETAIL = "match-detail"
    COURT_BOOKING = "court-booking"
    WAITLIST = "waitlist"
    ANALYTICS = "analytics"
    NOTIFICATIONS = "notifications"
    AVAILABILITY = "availability"
    STANDINGS = "standings"
    ACHIEVEMENTS = "achievements"
    PERSONAL_STATS = "personal-stats"
    PLAYER_DIRECTORY = "player-directory"
    PHOTO_GALLERY = "photo-gallery"
    DUES_PAYMENT = "dues-payment"
    TEAM_CHAT = "team-chat"
    PRACTICE_SCHEDULER = "practice-scheduler"
    FEEDBACK = "feedback"
    SETTINGS = "settings"
    DIVISION_STANDINGS = "division-standings"
    TEAM_SEASON_REPORT = "team-season-report"
    MY_STANDINGS = "my-standings"
    ADMIN = "admin"


class TabId(str, Enum):
    HOME = "home"
    SCHEDULE = "schedule"
    TEAMS = "teams"
    RATINGS = "ratings"
    MORE = "more"
    ADMIN = "admin"


# Reserved URL paths, checked in order (substring match) before auth routing
SYSTEM_ROUTES: Tuple[Tuple[str, Screen], ...] = (
    ("/auth/callback", Screen.OAUTH_CALLBACK),
    ("/debug", Screen.DEBUG),
)

# Every screen the initialization effect is allowed to select
INITIAL_SCREENS = frozenset({
    Screen.LOADING, Screen.OAUTH_CALLBACK, Screen.DEBUG,
    Screen.WELCOME, Screen.ONBOARDING, Screen.HOME,
})

CAPTAIN_ONLY_SCREENS = frozenset({Screen.ANALYTICS, Screen.COURT_BOOKING})
ADMIN_SCREENS = frozenset({Screen.ADMIN})


def tab_for_screen(screen: Screen) -> Optional[TabId]:
    """Tab id with the same tag as `screen`, if the screen is a tab root."""
    try:
        return TabId(screen.value)
    except ValueError:
        return None


def parse_screen(value) -> Optional[Screen]:
    if isinstance(value, Screen):
        return value
    try:
        return Screen(value)
    except ValueError:
        return None
