"""Queue of write requests that failed while the backend was unreachable.

Queued requests are replayed with `retry_all` once the connection is back;
each request is dropped after REQUEST_QUEUE_MAX_RETRIES failed attempts.
The file is shared by every browser session, so writes go through
`persistence.lock` and requests are tagged with the user that queued them.
"""
from __future__ import annotations
import logging
import random
import string
import time
from dataclasses import dataclass, asdict, field
from typing import Any, Callable, Dict, List, Optional

from domain.constants import REQUEST_QUEUE_MAX_RETRIES
from services import persistence

logger = logging.getLogger(__name__)


@dataclass
class QueuedRequest:
    id: str
    endpoint: str
    method: str
    body: Optional[Dict[str, Any]] = None
    user_id: Optional[str] = None
    timestamp: float = field(default_factory=time.time)
    retry_count: int = 0
    max_retries: int = REQUEST_QUEUE_MAX_RETRIES


def _new_id() -> str:
    # epoch millis + 9 random chars
    rand = "".join(random.choices(string.ascii_lowercase + string.digits, k=9))
    return f"{int(time.time() * 1000)}_{rand}"

def _load() -> List[QueuedRequest]:
    rows = persistence.load('request_queue', [])
    return [QueuedRequest(**r) for r in rows if isinstance(r, dict)]


def _save(queue: List[QueuedRequest]):
    persistence.atomic_write('request_queue', [asdict(r) for r in queue])


def add(endpoint: str, method: str, body: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None) -> str:
    req = QueuedRequest(id=_new_id(), endpoint=endpoint, method=method.upper(), body=body, user_id=user_id)
    with persistence.lock('request_queue'):
        queue = _load()
        queue.append(req)
        _save(queue)
    logger.info("Request queued (%s %s): %s", req.method, endpoint, req.id)
    return req.id


def get_all(user_id: Optional[str] = None) -> List[QueuedRequest]:
    """All queued requests, or only those queued by `user_id`."""
    return [r for r in _load() if user_id is None or r.user_id == user_id]


def get(request_id: str) -> Optional[QueuedRequest]:
    return next((r for r in _load() if r.id == request_id), None)


def remove(request_id: str):
    with persistence.lock('request_queue'):
        _save([r for r in _load() if r.id != request_id])


def clear():
    with persistence.lock('request_queue'):
        persistence.remove('request_queue')


def retry_all(send: Callable[[str, str, Optional[Dict[str, Any]]], Any],
              user_id: Optional[str] = None) -> Dict[str, int]:
    """Replay queued requests through `send(endpoint, method, body)`.

    Only `user_id`'s requests are replayed when given. `send` raises on
    failure and runs without the lock held. Requests queued while the replay
    is in flight are kept. Returns counts of sent, kept (will retry) and
    dropped (out of retries) requests.
    """
    pending = get_all(user_id)
    outcome: Dict[str, Optional[QueuedRequest]] = {}  # None: leaves the queue
    stats = {'sent': 0, 'kept': 0, 'dropped': 0}
    for req in pending:
        try:
            send(req.endpoint, req.method, req.body)
        except Exception as e:
            req.retry_count += 1
            if req.retry_count >= req.max_retries:
                logger.warning("Dropping queued request %s after %d attempts: %s",
                               req.id, req.retry_count, e)
                outcome[req.id] = None
                stats['dropped'] += 1
            else:
                outcome[req.id] = req
                stats['kept'] += 1
            continue
        outcome[req.id] = None
        stats['sent'] += 1

    with persistence.lock('request_queue'):
        merged = []
        for req in _load():
            if req.id not in outcome:
                merged.append(req)
            elif outcome[req.id] is not None:
                merged.append(outcome[req.id])
        _save(merged)
    return stats
