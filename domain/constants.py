"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for backend location, timeouts, and option lists.

Values that differ per deployment can be overridden with RALLY_* environment variables.
"""
import os

_BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Backend REST API (paths are appended as-is, e.g. f"{API_BASE_URL}/auth/me")
API_BASE_URL = os.environ.get('RALLY_API_URL', 'http://localhost:4800').rstrip('/')

# Seconds before a backend call is abandoned as a network error
REQUEST_TIMEOUT_SECONDS = float(os.environ.get('RALLY_REQUEST_TIMEOUT', '10'))

# Offline cache + queued requests live here
DATA_DIR = os.path.normpath(os.environ.get(
    'RALLY_DATA_DIR', os.path.join(_BASE_DIR, 'data')))

# Allow ?test=<screen> previews, which bypass auth routing
ENABLE_PREVIEW_ROUTES = os.environ.get(
    'RALLY_ENABLE_PREVIEW', '').lower() in {'1', 'true', 'yes'}

LOG_LEVEL = os.environ.get('RALLY_LOG_LEVEL', 'INFO').upper()

OFFLINE_CACHE_TTL_SECONDS = 24 * 60 * 60
CURRENT_USER_CACHE_SECONDS = 5 * 60
REQUEST_QUEUE_MAX_RETRIES = 3

# Options shown during onboarding
SPORTS = ["Tennis", "Pickleball", "Padel", "Badminton", "Volleyball", "Basketball", "Soccer"]
ROLES = ["player", "captain"]
