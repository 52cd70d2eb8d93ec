import logging

import streamlit as st

logger = logging.getLogger(__name__)

PRIMARY_ACCENT = "#2563EB"  # blue-600
GREEN = "#059669"  # emerald-600
YELLOW = "#D97706"  # amber-600
RED = "#DC2626"  # red-600
CHIP_BG = "#374151"

_TOAST_ICONS = {'error': "⚠️", 'warning': "⚠️", 'success': "✅", 'info': "ℹ️"}


def inject_base_css():
    """Emit the shared styles. Call once per script run, before any styled element."""
    st.markdown(
        f"""
        <style>
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .badge.yellow {{background:{YELLOW};}}
        .badge.red {{background:{RED};}}
        .top-bar {{font-size:1.15rem; font-weight:600; padding:.25rem 0;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def status_badge(status: str) -> str:
    s = (status or '').lower()
    if s in {"won", "confirmed", "completed", "active", "paid"}:
        cls = "green"
    elif s in {"lost", "cancelled", "overdue"}:
        cls = "red"
    else:
        cls = "yellow"
    return f'<span class="badge {cls}">{status}</span>'


def notify(kind: str, message: str):
    """Transient, non-blocking notification."""
    logger.debug("toast[%s]: %s", kind, message)
    st.toast(message, icon=_TOAST_ICONS.get(kind, "ℹ️"))
