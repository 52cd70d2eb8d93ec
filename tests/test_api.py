from unittest.mock import MagicMock

import pytest
import requests

from services import persistence, request_queue
from services.api import ApiClient
from services.errors import ApiError, NetworkError, NotFoundError


def _response(status=200, payload=None, content=b'{}'):
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.content = content
    resp.json.return_value = payload if payload is not None else {}
    resp.text = "error body"
    return resp


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr('services.persistence.DATA_DIR', str(tmp_path))
    return tmp_path


@pytest.fixture
def http():
    return MagicMock()


@pytest.fixture
def client(http):
    return ApiClient(base_url="http://api.test/", timeout=3, session=http)


def test_fetch_me_posts_user_id(client, http):
    http.request.return_value = _response(payload={'onboardingCompleted': True})
    assert client.fetch_me("u1") == {'onboardingCompleted': True}
    _, kwargs = http.request.call_args
    assert kwargs['json'] == {'userId': "u1"}
    assert kwargs['timeout'] == 3


def test_sync_user_body(client, http):
    http.request.return_value = _response()
    client.sync_user("u1", "a@b.io", "Ann")
    args, kwargs = http.request.call_args
    assert args[1] == "http://api.test/auth/sync-user"
    assert kwargs['json'] == {'stackUserId': "u1", 'email': "a@b.io", 'displayName': "Ann"}


def test_404_raises_not_found(client, http):
    http.request.return_value = _response(status=404)
    with pytest.raises(NotFoundError):
        client.fetch_me("ghost")


def test_server_error_raises_api_error(client, http):
    http.request.return_value = _response(status=500)
    with pytest.raises(ApiError) as exc:
        client.complete_onboarding("u1")
    assert exc.value.status == 500


def test_connection_error_raises_network_error(client, http):
    http.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(NetworkError):
        client.get_health()


def test_empty_body_is_empty_dict(client, http):
    http.request.return_value = _response(content=b'')
    assert client.get_health() == {}


def test_list_reads_fall_back_to_offline_cache(client, http):
    http.request.return_value = _response(payload=[{'id': 'm1'}])
    assert client.get_matches() == [{'id': 'm1'}]

    http.request.side_effect = requests.Timeout("slow")
    assert client.get_matches() == [{'id': 'm1'}]


def test_uncached_read_propagates_network_error(client, http):
    http.request.side_effect = requests.Timeout("slow")
    with pytest.raises(NetworkError):
        client.get_teams()


def test_create_team_is_queued_when_offline(client, http):
    http.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(NetworkError):
        client.create_team("Net Ninjas", "Tennis", "u1")
    queued = request_queue.get_all()
    assert len(queued) == 1
    assert queued[0].endpoint == '/teams'
    assert queued[0].body['name'] == "Net Ninjas"
    assert queued[0].user_id == "u1"

    http.request.side_effect = None
    http.request.return_value = _response(payload={'id': 't1'})
    assert client.replay_queued("u2") == {'sent': 0, 'kept': 0, 'dropped': 0}
    assert client.replay_queued("u1") == {'sent': 1, 'kept': 0, 'dropped': 0}
    assert request_queue.get_all() == []


def test_token_is_sent_as_bearer(client, http):
    http.request.return_value = _response(payload={'id': 'p1'})
    client.set_token("abc")
    client.get_player("p1")
    args, kwargs = http.request.call_args
    assert args == ('GET', "http://api.test/players/p1")
    assert kwargs['headers'] == {'Authorization': "Bearer abc"}


def test_detail_reads_are_not_cached(client, http):
    http.request.return_value = _response(payload={'id': 'l1'})
    client.get_league("l1")
    assert persistence.load('offline_cache', {}) == {}


def test_complete_onboarding_sends_profile_and_sports(client, http):
    http.request.return_value = _response()
    client.complete_onboarding("u1", sports=["Tennis"], role="captain", full_name="Ann Lee", phone="555-123-4567")
    args, kwargs = http.request.call_args
    assert args == ('POST', "http://api.test/auth/complete-onboarding")
    assert kwargs['json'] == {'userId': "u1", 'sports': ["Tennis"], 'role': "captain",
                              'fullName': "Ann Lee", 'phone': "555-123-4567"}


def test_complete_onboarding_minimal_body(client, http):
    http.request.return_value = _response()
    client.complete_onboarding("u1")
    _, kwargs = http.request.call_args
    assert kwargs['json'] == {'userId': "u1", 'sports': [], 'role': "player"}
