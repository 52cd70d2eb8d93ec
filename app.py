import logging
from urllib.parse import urlparse

import streamlit as st

from domain.constants import ENABLE_PREVIEW_ROUTES, LOG_LEVEL
from domain.registry import TAB_SCREENS
from domain.screens import Screen
from services.api import ApiClient
from services.auth import LocalAuthProvider
from services.session import AppSession
from ui.components import inject_base_css, notify, render_tab_bar, render_top_bar

# Import the screen rendering functions
from views import (admin_dashboard, auth_forms, details, home, more, onboarding, ratings,
                   schedule, system, teams, welcome)

logger = logging.getLogger(__name__)

# --- Screen Registry ---
# Maps every screen to the function that renders its body.
SCREEN_VIEWS = {
    Screen.LOADING: system.loading,
    Screen.OAUTH_CALLBACK: system.oauth_callback,
    Screen.DEBUG: system.debug,
    Screen.WELCOME: welcome.view,
    Screen.SIGN_IN: auth_forms.sign_in,
    Screen.SIGN_UP: auth_forms.sign_up,
    Screen.ONBOARDING: onboarding.view,
    Screen.HOME: home.view,
    Screen.SCHEDULE: schedule.view,
    Screen.TEAMS: teams.view,
    Screen.TEAM_DETAIL: teams.team_detail,
    Screen.RATINGS: ratings.view,
    Screen.MORE: more.view,
    Screen.MATCH_DETAIL: details.match_detail,
    Screen.COURT_BOOKING: details.generic,
    Screen.WAITLIST: details.waitlist,
    Screen.ANALYTICS: details.generic,
    Screen.NOTIFICATIONS: details.generic,
    Screen.AVAILABILITY: details.generic,
    Screen.STANDINGS: details.generic,
    Screen.ACHIEVEMENTS: details.generic,
    Screen.PERSONAL_STATS: details.generic,
    Screen.PLAYER_DIRECTORY: details.player_directory,
    Screen.PHOTO_GALLERY: details.generic,
    Screen.DUES_PAYMENT: details.generic,
    Screen.TEAM_CHAT: details.generic,
    Screen.PRACTICE_SCHEDULER: details.generic,
    Screen.FEEDBACK: details.generic,
    Screen.SETTINGS: details.generic,
    Screen.DIVISION_STANDINGS: details.division_standings,
    Screen.TEAM_SEASON_REPORT: details.team_season_report,
    Screen.MY_STANDINGS: details.my_standings,
    Screen.ADMIN: admin_dashboard.view,
}


def current_path():
    """URL path of this browser session; `?path=` stands in where the URL is unavailable."""
    url = getattr(st.context, 'url', None)
    if isinstance(url, str) and url:
        return urlparse(url).path or '/'
    raw = st.query_params.get('path')
    return raw if isinstance(raw, str) and raw else '/'


def get_session() -> AppSession:
    if 'app_session' not in st.session_state:
        st.session_state.app_session = AppSession(
            api=ApiClient(),
            auth=LocalAuthProvider(st.session_state),
            notify=notify,
        )
    return st.session_state.app_session


def main():
    """
    Main application router.

    Runs the auth-dependent effects, then renders exactly one screen: the shell
    chrome from the screen registry plus the body from `SCREEN_VIEWS`.
    """
    st.set_page_config(page_title="Rally Connect", layout="centered")
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    inject_base_css()

    session = get_session()
    path = current_path()
    preview = st.query_params.get('test') if ENABLE_PREVIEW_ROUTES else None

    session.refresh(path, preview)
    controller = session.controller
    ctx = controller.context(session.current_user, path)

    # --- Screen Rendering ---
    render_top_bar(ctx)
    SCREEN_VIEWS[ctx.screen](ctx, session)
    if ctx.screen in TAB_SCREENS:
        render_tab_bar(controller, session.current_user)


if __name__ == "__main__":
    main()
