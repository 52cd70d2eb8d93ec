import streamlit as st

from services import admin as admin_svc


def render_analytics_tab(session):
    """Displays league-wide counts and backend health."""
    st.subheader("📈 Overview")

    overview = admin_svc.get_league_overview(session.api)

    if overview['healthy']:
        st.success("Backend is reachable.")
    else:
        st.error("Backend health check failed; counts may come from the offline cache.")

    def _fmt(value):
        return "—" if value is None else value

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Leagues", _fmt(overview['leagues']))
    c2.metric("Teams", _fmt(overview['teams']))
    c3.metric("Players", _fmt(overview['players']))
    c4.metric("Matches", _fmt(overview['matches']))
