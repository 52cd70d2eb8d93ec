"""Backend REST client.

One `ApiClient` per session. Read endpoints fall back to the offline cache when
the backend cannot be reached; `create_team` is queued for later replay.
Callers get typed errors from `services.errors` and decide what to show.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import requests

from domain.constants import API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from services import offline_cache, request_queue
from services.errors import ApiError, NetworkError, NotFoundError

logger = logging.getLogger(__name__)


class ApiClient:
    def __init__(self, base_url: str = API_BASE_URL, timeout: float = REQUEST_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None, token: Optional[str] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Content-Type': 'application/json'})
        self.token = token

    def set_token(self, token: Optional[str]):
        self.token = token

    def request(self, endpoint: str, method: str = 'GET', body: Optional[Dict[str, Any]] = None,
                params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        headers = {'Authorization': f"Bearer {self.token}"} if self.token else {}
        try:
            resp = self.session.request(method, url, json=body, params=params,
                                        headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("API request failed: %s %s (%s)", method, endpoint, e)
            raise NetworkError(endpoint, e) from e

        if resp.status_code == 401:
            logger.warning("API: Unauthorized (401) on %s - token may have expired", endpoint)
        if resp.status_code == 404:
            raise NotFoundError(404, resp.text, endpoint)
        if not resp.ok:
            raise ApiError(resp.status_code, resp.text, endpoint)
        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError:
            return {}

    # --- Auth ---

    def sync_user(self, stack_user_id: str, email: str, display_name: str) -> Any:
        return self.request('/auth/sync-user', 'POST', {
            'stackUserId': stack_user_id,
            'email': email,
            'displayName': display_name,
        })

    def fetch_me(self, user_id: str) -> Dict[str, Any]:
        data = self.request('/auth/me', 'POST', {'userId': user_id})
        return data if isinstance(data, dict) else {}

    def complete_onboarding(self, user_id: str, sports: Optional[List[str]] = None, role: Optional[str] = None,
                            full_name: Optional[str] = None, phone: Optional[str] = None) -> Any:
        body = {'userId': user_id, 'sports': list(sports or []), 'role': role or 'player'}
        if full_name:
            body['fullName'] = full_name
        if phone:
            body['phone'] = phone
        return self.request('/auth/complete-onboarding', 'POST', body)

    # --- Read endpoints (cached) ---

    def _cached_get(self, endpoint: str, cache_name: str, user_id: Optional[str] = None,
                    params: Optional[Dict[str, Any]] = None):
        try:
            data = self.request(endpoint, params=params)
        except NetworkError:
            cached = offline_cache.get(cache_name, user_id)
            if cached:
                logger.info("Using cached %s data", cache_name)
                return cached
            raise
        offline_cache.put(cache_name, data, user_id)
        return data

    def get_health(self):
        return self.request('/health')

    def get_sports(self):
        return self._cached_get('/sports', offline_cache.SPORTS)

    def get_leagues(self):
        return self._cached_get('/leagues', offline_cache.LEAGUES)

    def get_league(self, league_id: str):
        return self.request(f'/leagues/{league_id}')

    def get_teams(self):
        return self._cached_get('/teams', offline_cache.TEAMS)

    def get_user_teams(self, user_id: str):
        return self._cached_get('/teams', offline_cache.USER_TEAMS, user_id=user_id,
                                params={'userId': user_id})

    def get_team(self, team_id: str):
        return self.request(f'/teams/{team_id}')

    def get_players(self):
        return self._cached_get('/players', offline_cache.PLAYERS)

    def get_player(self, player_id: str):
        return self.request(f'/players/{player_id}')

    def get_matches(self):
        return self._cached_get('/matches', offline_cache.MATCHES)

    def get_match(self, match_id: str):
        return self.request(f'/matches/{match_id}')

    def get_standings(self):
        return self._cached_get('/standings', offline_cache.STANDINGS)

    def get_standings_by_division(self, division_id: str):
        return self.request(f'/standings/division/{division_id}')

    # --- Writes ---

    def create_team(self, name: str, sport: str, user_id: str, club: Optional[str] = None):
        body = {'name': name, 'sport': sport, 'userId': user_id}
        if club:
            body['club'] = club
        try:
            return self.request('/teams', 'POST', body)
        except NetworkError:
            request_queue.add('/teams', 'POST', body, user_id=user_id)
            raise

    def replay_queued(self, user_id: Optional[str] = None) -> Dict[str, int]:
        """Replay the offline write queue, only `user_id`'s requests when given."""
        return request_queue.retry_all(lambda endpoint, method, body: self.request(endpoint, method, body),
                                       user_id=user_id)
