import logging

import streamlit as st

from domain.constants import SPORTS
from services.errors import ApiError, NetworkError
from ui.components import action_buttons, match_card, records_table, team_card
from utils.validation import validate_team_creation
from views.common import as_list, fetch

logger = logging.getLogger(__name__)


def _user_id(session):
    state = session.auth.state()
    return state.user.id if state.user else None


def view(ctx, session):
    user_id = _user_id(session)
    teams = as_list(fetch("your teams", session.api.get_user_teams, user_id, default=[])) if user_id else []
    if teams:
        for t in teams:
            team_card(t, on_open=ctx.action("on_view_team"))
    else:
        st.caption("You're not on a team yet.")
    action_buttons(ctx, ["on_open_chat"], columns=1)

    if ctx.is_captain:
        _create_team_form(session, user_id)


def _create_team_form(session, user_id):
    with st.expander("➕ Create a team"):
        with st.form("form_create_team"):
            name = st.text_input("Team name", key="create_team_name")
            sport = st.selectbox("Sport", [""] + SPORTS, key="create_team_sport")
            club = st.text_input("Club / location (optional)", key="create_team_club")
            submitted = st.form_submit_button("Create team")

        if submitted:
            result = validate_team_creation(name, sport or None, club)
            if not result.is_valid:
                for message in result.messages():
                    st.error(message)
                return
            try:
                session.api.create_team(name.strip(), sport, user_id, club.strip() or None)
            except NetworkError:
                st.info("You're offline. The team will be created when the connection is back.")
                return
            except ApiError as e:
                logger.error("Team creation failed: %s", e)
                st.error(e.message)
                return
            st.success(f"Team '{name.strip()}' created!")


def team_detail(ctx, session):
    team_id = ctx.params.get('team_id')
    if team_id is None:
        teams = as_list(fetch("your teams", session.api.get_user_teams, _user_id(session), default=[]))
        team_id = teams[0].get('id') if teams else None
    if team_id is None:
        st.caption("Pick a team from the Teams tab.")
        return

    team = fetch("the team", session.api.get_team, team_id, default={}) or {}
    st.subheader(team.get('name', 'Team'))
    c1, c2, c3 = st.columns(3)
    c1.metric("Wins", team.get('wins') or 0)
    c2.metric("Losses", team.get('losses') or 0)
    c3.metric("Players", len(team.get('players') or []))

    st.markdown("**Roster**")
    records_table(team.get('players') or [], ["name", "email", "rating"])

    upcoming = [m for m in team.get('matches') or [] if (m.get('status') or 'scheduled').lower() == 'scheduled']
    if upcoming:
        st.markdown("**Upcoming**")
        match_card(upcoming[0], on_open=ctx.action("on_view_match"), key="team_next_match")

    action_buttons(ctx, ["on_view_team_chat", "on_view_team_report"], team_id=team_id)
