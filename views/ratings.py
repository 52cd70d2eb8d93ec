import streamlit as st

from ui.components import records_table
from views.common import as_list, fetch


def view(ctx, session):
    st.subheader("League standings")
    standings = as_list(fetch("standings", session.api.get_standings, default=[]))
    records_table(standings, ["team", "wins", "losses", "points"])

    st.subheader("Player ratings")
    players = as_list(fetch("players", session.api.get_players, default=[]))
    rated = sorted((p for p in players if p.get('rating') is not None),
                   key=lambda p: p['rating'], reverse=True)
    records_table(rated, ["name", "rating", "team"])
