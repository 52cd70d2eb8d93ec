"""Helpers shared by the data-backed views."""
import logging
from typing import Any, Callable, List

import streamlit as st

from services.errors import ApiError, NetworkError

logger = logging.getLogger(__name__)


def fetch(what: str, call: Callable[..., Any], *args, default: Any = None) -> Any:
    """Call the API; on failure show an inline warning and return `default`."""
    try:
        return call(*args)
    except (ApiError, NetworkError) as e:
        logger.warning("Could not load %s: %s", what, e)
        st.warning(f"Could not load {what}. Pull to refresh or try again later.")
        return default


def as_list(payload: Any, key: str = 'data') -> List[Any]:
    """Endpoints answer either a bare list or `{data: [...]}`."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get(key), list):
        return payload[key]
    return []
