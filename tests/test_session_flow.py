"""End-to-end routing through AppSession with a fake backend and an in-memory auth store."""
import pytest

from domain.registry import SCREEN_REGISTRY
from domain.screens import Screen
from services.auth import LocalAuthProvider
from services.errors import ApiError, NetworkError, NotFoundError
from services.session import AppSession


class FakeBackend:
    def __init__(self):
        self.onboarded = set()
        self.roles = {}
        self.sync_error = None
        self.me_error = None
        self.complete_error = None
        self.calls = []
        self.onboarding_payloads = []
        self.token = None

    def set_token(self, token):
        self.token = token

    def sync_user(self, stack_user_id, email, display_name):
        self.calls.append(('sync', stack_user_id))
        if self.sync_error:
            raise self.sync_error
        return {}

    def fetch_me(self, user_id):
        self.calls.append(('me', user_id))
        if self.me_error:
            raise self.me_error
        return {'onboardingCompleted': user_id in self.onboarded,
                'roles': self.roles.get(user_id, ['player'])}

    def complete_onboarding(self, user_id, **payload):
        self.calls.append(('complete', user_id))
        self.onboarding_payloads.append(payload)
        if self.complete_error:
            raise self.complete_error
        self.onboarded.add(user_id)
        return {}


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def toasts():
    return []


@pytest.fixture
def session(backend, toasts):
    return AppSession(api=backend, auth=LocalAuthProvider({}),
                      notify=lambda kind, msg: toasts.append((kind, msg)))


def _screen(session):
    return session.controller.state.current_screen


def test_anonymous_visitor_sign_up_to_home(session, backend):
    session.refresh("/")
    assert _screen(session) == Screen.WELCOME

    ctx = session.controller.context()
    ctx.action("on_sign_up")()
    assert _screen(session) == Screen.SIGN_UP

    session.auth.sign_up("new@league.io", "New Player")
    session.controller.context().action("on_complete")()
    assert _screen(session) == Screen.LOADING

    session.refresh("/")
    assert _screen(session) == Screen.ONBOARDING
    assert session.controller.state.is_returning_user is False

    session.controller.context().action("on_complete")(
        role="player", sports=["Tennis", "Padel"], profile={'name': "New Player", 'phone': "555-123-4567"})
    assert session.controller.state.onboarding_completed is True
    assert backend.onboarding_payloads == [{
        'sports': ["Tennis", "Padel"], 'role': "player",
        'full_name': "New Player", 'phone': "555-123-4567",
    }]

    session.refresh("/")
    assert _screen(session) == Screen.HOME
    assert session.controller.state.is_returning_user is True
    assert [c[0] for c in backend.calls] == ['sync', 'me', 'complete']


def test_returning_user_on_oauth_callback(session, backend):
    user = session.auth.sign_in("back@league.io")
    backend.onboarded.add(user.id)
    session.refresh("/auth/callback")
    assert _screen(session) == Screen.OAUTH_CALLBACK

    session.controller.context(path="/auth/callback").action("on_continue")()
    session.refresh("/auth/callback")
    assert _screen(session) == Screen.HOME


def test_onboarding_failure_keeps_user_on_onboarding(session, backend, toasts):
    session.auth.sign_in("flaky@league.io")
    session.refresh("/")
    backend.complete_error = ApiError(500, "down", "/auth/complete-onboarding")

    session.controller.context().action("on_complete")(role="captain")
    session.refresh("/")

    assert _screen(session) == Screen.ONBOARDING
    assert session.controller.state.onboarding_completed is False
    assert ('error', "Failed to save your progress") in toasts


def test_unknown_user_is_signed_out(session, backend, toasts):
    session.auth.sign_in("ghost@league.io")
    backend.me_error = NotFoundError(404, "not found", "/auth/me")
    session.refresh("/")

    assert _screen(session) == Screen.WELCOME
    assert session.auth.state().is_authenticated is False
    assert session.current_user is None
    assert toasts and toasts[0][0] == 'warning'


def test_network_failure_stays_on_loading_until_retry(session, backend, toasts):
    session.auth.sign_in("offline@league.io")
    backend.sync_error = NetworkError("/auth/sync-user", OSError("refused"))
    session.refresh("/")
    assert _screen(session) == Screen.LOADING
    assert session.last_error

    # No automatic retry on the next script run
    session.refresh("/")
    assert [c[0] for c in backend.calls] == ['sync']
    assert len(toasts) == 1

    backend.sync_error = None
    session.controller.context().action("on_retry")()
    session.refresh("/")
    assert _screen(session) == Screen.ONBOARDING
    assert session.last_error is None


def test_current_user_is_cached_between_runs(session, backend):
    session.auth.sign_in("cached@league.io")
    session.refresh("/")
    session.refresh("/")
    assert [c[0] for c in backend.calls] == ['sync', 'me']


def test_admin_role_is_recorded(session, backend):
    user = session.auth.sign_in("boss@league.io")
    backend.onboarded.add(user.id)
    backend.roles[user.id] = ['admin', 'player']
    session.refresh("/")
    assert session.current_user.is_admin
    assert session.controller.state.user_role == 'admin'


def test_sign_out_resets_session(session, backend):
    user = session.auth.sign_in("leaving@league.io")
    backend.onboarded.add(user.id)
    session.refresh("/")
    session.controller.change_tab("more")
    session.controller.context().action("on_sign_out")()
    session.refresh("/")
    assert _screen(session) == Screen.WELCOME
    assert session.current_user is None


def test_registry_loading_has_retry():
    assert "on_retry" in SCREEN_REGISTRY[Screen.LOADING].actions


def test_auth_provider_loading_shows_loading_screen(session, backend):
    session.auth.sign_in("slow@league.io")
    session.auth.set_loading(True)
    session.refresh("/")
    assert _screen(session) == Screen.LOADING
    assert backend.calls == []

    session.auth.set_loading(False)
    session.refresh("/")
    assert _screen(session) == Screen.ONBOARDING


def test_provider_token_is_handed_to_the_api(session, backend):
    session.auth.sign_in("token@league.io", access_token="jwt-abc")
    session.refresh("/")
    assert backend.token == "jwt-abc"

    session.auth.sign_out()
    session.refresh("/")
    assert backend.token is None
