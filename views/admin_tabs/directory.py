import streamlit as st

from services import admin as admin_svc
from ui.components import records_table
from views.common import as_list, fetch

_SECTIONS = {
    "Leagues": ("get_leagues", ["name", "sport", "season", "status"]),
    "Teams": ("get_teams", ["name", "sport", "division", "wins", "losses"]),
    "Players": ("get_players", ["name", "email", "team", "rating"]),
}


def render_directory_tab(session):
    """Read-only listings of leagues, teams and players with CSV export."""
    st.subheader("🗂️ Directory")
    section = st.radio("Show", list(_SECTIONS), horizontal=True, key="admin_directory_section")
    getter, columns = _SECTIONS[section]
    rows = as_list(fetch(section.lower(), getattr(session.api, getter), default=[]))
    records_table(rows, columns)
    if rows:
        st.download_button(f"Download: {section.lower()}.csv", admin_svc.export_to_csv(rows),
                           f"{section.lower()}.csv", "text/csv", key=f"admin_export_{section}")
