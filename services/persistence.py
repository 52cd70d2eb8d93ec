import json
import logging
import os
import tempfile
import shutil
from typing import Any

from filelock import FileLock

from domain.constants import DATA_DIR

logger = logging.getLogger(__name__)

FILES = {
    'offline_cache': 'offline_cache.json',
    'request_queue': 'request_queue.json',
}

LOCK_TIMEOUT_SECONDS = 10


def _path(key: str) -> str:
    return os.path.join(DATA_DIR, FILES[key])


def load(key: str, default: Any) -> Any:
    file_path = _path(key)
    if not os.path.exists(file_path):
        return default
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", file_path, e)
        return default
    # A file holding the wrong shape is treated as empty
    if not isinstance(data, type(default)):
        return default
    return data


def atomic_write(key: str, data: Any):
    file_path = _path(key)
    os.makedirs(os.path.dirname(file_path), exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(
        prefix='tmp_', suffix='.json', dir=os.path.dirname(file_path))
    with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    shutil.move(tmp_path, file_path)


def remove(key: str):
    file_path = _path(key)
    if os.path.exists(file_path):
        os.remove(file_path)


def lock(key: str) -> FileLock:
    """Lock guarding a read-modify-write of `key`'s file across sessions.

    Not reentrant: never take it while already holding it for the same key.
    """
    file_path = _path(key)
    os.makedirs(os.path.dirname(file_path), exist_ok=True)
    return FileLock(file_path + '.lock', timeout=LOCK_TIMEOUT_SECONDS)
