import streamlit as st

from ui.components import action_buttons, match_card
from views.common import as_list, fetch


def view(ctx, session):
    user = ctx.user
    name = user.display_name if user else "there"
    greeting = "Welcome back" if session.controller.state.is_returning_user else "Welcome"
    st.header(f"{greeting}, {name} 👋")

    matches = as_list(fetch("matches", session.api.get_matches, default=[]))
    upcoming = [m for m in matches if (m.get('status') or 'scheduled').lower() == 'scheduled']
    st.subheader("Next match")
    if upcoming:
        match_card(upcoming[0], on_open=ctx.action("on_view_match"), key="home_next_match")
    else:
        st.caption("No upcoming matches.")

    st.subheader("Quick actions")
    action_buttons(ctx, [n for n in ctx.visible_actions() if n != "on_view_match"])
