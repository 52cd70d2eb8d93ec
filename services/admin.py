"""
Back-office helpers for the association admin screen.
Read-only league overview plus management of the local offline data.
"""
import csv
import io
import logging
import time
from typing import Any, Dict, List

from services import offline_cache, persistence, request_queue
from services.errors import ApiError, NetworkError

logger = logging.getLogger(__name__)


def _rows(payload: Any) -> List[Dict[str, Any]]:
    if isinstance(payload, dict):
        payload = payload.get('data', [])
    return [r for r in payload or [] if isinstance(r, dict)]


def get_league_overview(api) -> Dict[str, Any]:
    """Counts for the admin summary strip. Missing sections count as None."""
    overview: Dict[str, Any] = {'healthy': False}
    try:
        api.get_health()
        overview['healthy'] = True
    except (ApiError, NetworkError) as e:
        logger.warning("Health check failed: %s", e)
    for key, getter in (('leagues', api.get_leagues), ('teams', api.get_teams),
                        ('players', api.get_players), ('matches', api.get_matches)):
        try:
            overview[key] = len(_rows(getter()))
        except (ApiError, NetworkError) as e:
            logger.warning("Could not count %s: %s", key, e)
            overview[key] = None
    return overview


def export_to_csv(rows: List[Dict[str, Any]]) -> str:
    """Exports API rows to a CSV string; nested objects are written by name."""
    rows = _rows(rows)
    if not rows:
        return ""

    output = io.StringIO()
    # Ensure all dicts have the same keys for the header
    fieldnames = sorted(set(key for item in rows for key in item.keys()))
    writer = csv.DictWriter(output, fieldnames=fieldnames)
    writer.writeheader()
    for item in rows:
        writer.writerow({k: (v.get('name', v.get('id')) if isinstance(v, dict) else v)
                         for k, v in item.items()})
    return output.getvalue()


def get_offline_status(now: float = None) -> Dict[str, Any]:
    now = time.time() if now is None else now
    entries = persistence.load('offline_cache', {})
    cached = []
    for key, entry in sorted(entries.items()):
        if isinstance(entry, dict):
            cached.append({'key': key, 'age_minutes': round((now - float(entry.get('timestamp', 0))) / 60, 1)})
    queued = [{'id': r.id, 'endpoint': r.endpoint, 'method': r.method, 'user': r.user_id,
               'retries': r.retry_count}
              for r in request_queue.get_all()]
    return {'cached': cached, 'queued': queued}


def reset_offline_data():
    """Deletes the offline cache and any queued writes."""
    offline_cache.clear_all()
    request_queue.clear()
    logger.info("Offline cache and request queue cleared")
