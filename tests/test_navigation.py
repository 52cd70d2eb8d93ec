import pytest

from domain.models import AuthSignals, CurrentUser, NavigationState
from domain.registry import SCREEN_REGISTRY
from domain.screens import CAPTAIN_ONLY_SCREENS, INITIAL_SCREENS, Screen, TabId
from services.errors import ApiError
from services.navigation import (
    NavigationController, back_target, detect_system_screen, navigate, resolve_initial_screen,
)

ANON = AuthSignals(is_loading=False, is_authenticated=False, user_id=None, onboarding_completed=False)
LOADING = AuthSignals(is_loading=True, is_authenticated=False, user_id=None, onboarding_completed=False)
NEW_USER = AuthSignals(is_loading=False, is_authenticated=True, user_id="u1", onboarding_completed=False)
RETURNING = AuthSignals(is_loading=False, is_authenticated=True, user_id="u1", onboarding_completed=True)


class FakeAuthState:
    def __init__(self, user_id="u1"):
        self.user = type("U", (), {"id": user_id})() if user_id else None


class FakeAuth:
    def __init__(self, user_id="u1"):
        self._state = FakeAuthState(user_id)
        self.signed_out = False

    def state(self):
        return self._state

    def sign_out(self):
        self.signed_out = True
        self._state = FakeAuthState(None)


class FakeApi:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []
        self.payloads = []

    def complete_onboarding(self, user_id, **payload):
        self.calls.append(user_id)
        self.payloads.append(payload)
        if self.fail:
            raise ApiError(500, "boom", "/auth/complete-onboarding")
        return {}


@pytest.mark.parametrize("signals,expected", [
    (LOADING, Screen.LOADING),
    (ANON, Screen.WELCOME),
    (NEW_USER, Screen.ONBOARDING),
    (RETURNING, Screen.HOME),
])
def test_initial_screen_priority(signals, expected):
    assert resolve_initial_screen(signals, "/") == expected


@pytest.mark.parametrize("signals", [ANON, LOADING, NEW_USER, RETURNING])
def test_reserved_paths_win_over_auth_state(signals):
    assert resolve_initial_screen(signals, "/debug") == Screen.DEBUG
    assert resolve_initial_screen(signals, "/auth/callback") == Screen.OAUTH_CALLBACK


def test_debug_matches_anywhere_in_path():
    assert detect_system_screen("/app/debug/state") == Screen.DEBUG
    assert detect_system_screen("/") is None
    assert detect_system_screen(None) is None


def test_returning_user_is_marked_on_home():
    nav = NavigationController()
    nav.apply_auth(RETURNING, "/")
    assert nav.state.current_screen == Screen.HOME
    assert nav.state.is_returning_user is True


def test_apply_auth_is_idempotent_for_unchanged_signals():
    nav = NavigationController()
    assert nav.apply_auth(RETURNING, "/") is True
    nav.navigate_to(Screen.SCHEDULE, TabId.SCHEDULE)
    # Screen changes do not feed back into routing
    assert nav.apply_auth(RETURNING, "/") is False
    assert nav.state.current_screen == Screen.SCHEDULE


def test_navigate_twice_gives_same_state():
    once = navigate(NavigationState(current_screen=Screen.HOME), Screen.SCHEDULE, TabId.SCHEDULE)
    twice = navigate(once, Screen.SCHEDULE, TabId.SCHEDULE)
    assert once == twice
    assert once.active_tab == TabId.SCHEDULE


def test_navigate_keeps_tab_when_not_given():
    state = NavigationState(current_screen=Screen.TEAMS, active_tab=TabId.TEAMS)
    assert navigate(state, Screen.TEAM_DETAIL).active_tab == TabId.TEAMS


def test_unknown_screen_raises():
    with pytest.raises(ValueError):
        navigate(NavigationState(), "not-a-screen")


def test_team_report_without_team_falls_back_to_standings():
    state = navigate(NavigationState(current_screen=Screen.MORE), Screen.TEAM_SEASON_REPORT)
    assert state.current_screen == Screen.DIVISION_STANDINGS


def test_team_report_carries_team_id():
    state = navigate(NavigationState(current_screen=Screen.DIVISION_STANDINGS),
                     Screen.TEAM_SEASON_REPORT, team_id="t9")
    assert state.current_screen == Screen.TEAM_SEASON_REPORT
    assert state.param("team_id") == "t9"


@pytest.mark.parametrize("tab,expected", [
    (TabId.SCHEDULE, Screen.SCHEDULE),
    (TabId.TEAMS, Screen.TEAMS),
    (TabId.HOME, Screen.HOME),
    (TabId.MORE, Screen.HOME),
])
def test_match_detail_returns_to_originating_tab(tab, expected):
    state = NavigationState(current_screen=Screen.MATCH_DETAIL, active_tab=tab)
    assert back_target(state) == (expected, None)


def test_team_detail_goes_back_to_teams():
    state = NavigationState(current_screen=Screen.TEAM_DETAIL, active_tab=TabId.HOME)
    assert back_target(state) == (Screen.TEAMS, TabId.TEAMS)


def test_home_has_no_back_target():
    assert back_target(NavigationState(current_screen=Screen.HOME)) is None


def test_failed_onboarding_completion_keeps_user_on_onboarding():
    toasts = []
    nav = NavigationController(api=FakeApi(fail=True), auth=FakeAuth(),
                               notify=lambda kind, msg: toasts.append((kind, msg)))
    nav.apply_auth(NEW_USER, "/")
    assert nav.complete_onboarding("player") is False
    assert nav.state.onboarding_completed is False
    assert nav.state.current_screen == Screen.ONBOARDING
    assert toasts == [("error", "Failed to save your progress")]


def test_successful_onboarding_routes_home_on_next_effect():
    api = FakeApi()
    nav = NavigationController(api=api, auth=FakeAuth())
    nav.apply_auth(NEW_USER, "/")
    assert nav.complete_onboarding("captain") is True
    assert api.calls == ["u1"]
    assert api.payloads == [{'sports': [], 'role': "captain", 'full_name': None, 'phone': None}]
    assert nav.state.user_role == "captain"
    signals = AuthSignals(False, True, "u1", nav.state.onboarding_completed)
    nav.apply_auth(signals, "/")
    assert nav.state.current_screen == Screen.HOME


def test_non_captain_never_auto_routed_to_captain_screens():
    nav = NavigationController()
    for signals in (ANON, LOADING, NEW_USER, RETURNING):
        nav.request_recompute()
        nav.apply_auth(signals, "/")
        assert nav.state.current_screen in INITIAL_SCREENS
        assert nav.state.current_screen not in CAPTAIN_ONLY_SCREENS


def test_captain_actions_hidden_for_players():
    nav = NavigationController()
    nav.apply_auth(RETURNING, "/")
    player = CurrentUser(id="u1", email="p@x.io", display_name="P", roles=["player"])
    ctx = nav.context(player)
    assert "on_book_court" not in ctx.visible_actions()
    assert "on_view_analytics" not in ctx.visible_actions()
    captain = CurrentUser(id="u1", email="c@x.io", display_name="C", roles=["captain"])
    assert "on_book_court" in nav.context(captain).visible_actions()


def test_admin_guard_redirects_non_admin():
    nav = NavigationController()
    nav.apply_auth(RETURNING, "/")
    nav.navigate_to(Screen.ADMIN)
    nav.enforce_role_guard(CurrentUser(id="u1", email="p@x.io", display_name="P", roles=["player"]))
    assert nav.state.current_screen == Screen.HOME


def test_leaving_debug_route_recomputes_from_auth():
    nav = NavigationController()
    nav.apply_auth(RETURNING, "/debug")
    assert nav.state.current_screen == Screen.DEBUG
    nav.leave_system_route("/debug")
    assert nav.state.current_screen == Screen.LOADING
    nav.apply_auth(RETURNING, "/debug")
    assert nav.state.current_screen == Screen.HOME


def test_sign_out_action_returns_to_welcome():
    auth = FakeAuth()
    nav = NavigationController(auth=auth)
    nav.apply_auth(RETURNING, "/")
    nav.change_tab(TabId.MORE)
    nav.context().action("on_sign_out")()
    assert auth.signed_out
    assert nav.state.current_screen == Screen.WELCOME


def test_preview_route_sets_tab_and_role():
    nav = NavigationController()
    nav.apply_auth(ANON, "/", preview="teams")
    assert nav.state.current_screen == Screen.TEAMS
    assert nav.state.active_tab == TabId.TEAMS
    assert nav.state.user_role == "captain"
    assert nav.state.is_returning_user is False


def test_every_screen_has_registry_entry():
    assert set(SCREEN_REGISTRY) == set(Screen)


def test_back_from_season_report_returns_to_same_team():
    nav = NavigationController()
    nav.apply_auth(RETURNING, "/")
    nav.change_tab(TabId.TEAMS)
    nav.navigate_to(Screen.TEAM_DETAIL, team_id="t2")
    nav.navigate_to(Screen.TEAM_SEASON_REPORT, team_id="t2")
    nav.go_back()
    assert nav.state.current_screen == Screen.TEAM_DETAIL
    assert nav.state.param("team_id") == "t2"
    assert nav.state.active_tab == TabId.TEAMS


def test_opening_another_team_replaces_kept_team():
    state = NavigationState(current_screen=Screen.TEAM_SEASON_REPORT, params=(("team_id", "t2"),))
    assert navigate(state, Screen.TEAM_DETAIL, team_id="t5").param("team_id") == "t5"
    # Leaving for a tab root drops the kept team
    assert navigate(state, Screen.TEAMS, TabId.TEAMS).params == ()
