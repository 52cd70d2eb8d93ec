import streamlit as st

from ui.components import match_card
from views.common import as_list, fetch


def view(ctx, session):
    matches = as_list(fetch("the schedule", session.api.get_matches, default=[]))
    if not matches:
        st.caption("No matches scheduled yet.")
        return
    show_past = st.toggle("Show completed matches", key="schedule_show_past")
    for m in matches:
        if not show_past and (m.get('status') or '').lower() == 'completed':
            continue
        match_card(m, on_open=ctx.action("on_view_match"))
