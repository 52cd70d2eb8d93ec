"""Detail screens pushed on top of the tabs."""
import streamlit as st

from domain.screens import Screen
from ui.components import action_buttons, records_table, status_badge
from views.common import as_list, fetch


def match_detail(ctx, session):
    match_id = ctx.params.get('match_id')
    if match_id is None:
        st.caption("No match selected.")
        return
    match = fetch("the match", session.api.get_match, match_id, default={}) or {}
    home = (match.get('homeTeam') or {}).get('name', 'Home')
    away = (match.get('awayTeam') or {}).get('name', 'Away')
    st.subheader(f"{home} vs {away}")
    st.markdown(status_badge(match.get('status', 'Scheduled')), unsafe_allow_html=True)
    c1, c2 = st.columns(2)
    c1.metric("When", match.get('scheduledAt') or 'TBD')
    c2.metric("Where", match.get('location') or 'TBD')
    if match.get('homeScore') is not None:
        st.metric("Score", f"{match['homeScore']} - {match.get('awayScore', 0)}")
    action_buttons(ctx)


def division_standings(ctx, session):
    division_id = ctx.params.get('division_id')
    if division_id:
        rows = as_list(fetch("division standings", session.api.get_standings_by_division, division_id, default=[]))
    else:
        rows = as_list(fetch("standings", session.api.get_standings, default=[]))
    records_table(rows, ["team", "wins", "losses", "points"])
    for row in rows:
        team = row.get('team') if isinstance(row.get('team'), dict) else {}
        team_id = team.get('id') or row.get('teamId')
        if team_id is None:
            continue
        st.button(f"📊 {team.get('name', team_id)}", key=f"standings_team_{team_id}",
                  on_click=ctx.action("on_team_click"), kwargs={'team_id': team_id})


def team_season_report(ctx, session):
    team_id = ctx.params.get('team_id')
    if team_id is None:
        st.caption("No team selected.")
        return
    team = fetch("the team", session.api.get_team, team_id, default={}) or {}
    st.subheader(team.get('name', 'Team'))
    wins, losses = team.get('wins') or 0, team.get('losses') or 0
    played = wins + losses
    c1, c2, c3 = st.columns(3)
    c1.metric("Played", played)
    c2.metric("Record", f"{wins}-{losses}")
    c3.metric("Win %", f"{(wins / played * 100):.0f}%" if played else "—")
    records_table(team.get('matches') or [], ["scheduledAt", "homeTeam", "awayTeam", "status"])


def my_standings(ctx, session):
    user_id = session.auth.state().user.id if session.auth.state().user else None
    teams = as_list(fetch("your teams", session.api.get_user_teams, user_id, default=[])) if user_id else []
    standings = as_list(fetch("standings", session.api.get_standings, default=[]))
    mine = {t.get('id') for t in teams}
    rows = [r for r in standings if (r.get('team') or {}).get('id') in mine or r.get('teamId') in mine]
    records_table(rows, ["team", "wins", "losses", "points"])
    action_buttons(ctx, ["on_view_full_standings"], columns=1)
    for t in teams:
        st.button(f"📊 {t.get('name', 'Team')} report", key=f"my_standings_{t.get('id')}",
                  on_click=ctx.action("on_view_team_report"), kwargs={'team_id': t.get('id')})


def _pick(label: str, rows, key: str):
    """Selectbox over API rows by name; returns the picked id or None."""
    by_id = {r.get('id'): r.get('name') or r.get('id') for r in rows if isinstance(r, dict) and r.get('id')}
    if not by_id:
        return None
    return st.selectbox(label, [None] + list(by_id), key=key,
                        format_func=lambda i: "Select..." if i is None else str(by_id[i]))


def player_directory(ctx, session):
    players = as_list(fetch("players", session.api.get_players, default=[]))
    records_table(players, ["name", "email", "team", "rating"])
    player_id = _pick("Player profile", players, key="player_directory_pick")
    if player_id is not None:
        player = fetch("the player", session.api.get_player, player_id, default={}) or {}
        with st.container(border=True):
            st.markdown(f"**{player.get('name', 'Player')}**")
            c1, c2 = st.columns(2)
            c1.metric("Rating", player.get('rating') or "—")
            c2.metric("Matches", player.get('matchesPlayed') or 0)
            if player.get('email'):
                st.caption(player['email'])
    action_buttons(ctx)


def waitlist(ctx, session):
    leagues = as_list(fetch("leagues", session.api.get_leagues, default=[]))
    records_table(leagues, ["name", "sport", "status"])
    league_id = _pick("League", leagues, key="waitlist_pick")
    if league_id is not None:
        league = fetch("the league", session.api.get_league, league_id, default={}) or {}
        with st.container(border=True):
            st.markdown(f"**{league.get('name', 'League')}**")
            st.markdown(status_badge(league.get('status') or "Open"), unsafe_allow_html=True)
            divisions = league.get('divisions') or []
            if divisions:
                records_table(divisions, ["name", "level"])
    action_buttons(ctx)


# Screens whose content is a plain API listing
_LISTINGS = {
    Screen.STANDINGS: ("standings", "get_standings", ["team", "wins", "losses", "points"]),
    Screen.COURT_BOOKING: ("upcoming matches", "get_matches", ["scheduledAt", "location", "status"]),
    Screen.AVAILABILITY: ("upcoming matches", "get_matches", ["scheduledAt", "homeTeam", "awayTeam"]),
    Screen.ANALYTICS: ("standings", "get_standings", ["team", "wins", "losses", "points"]),
}


def generic(ctx, session):
    """Fallback body for screens without a dedicated layout."""
    listing = _LISTINGS.get(ctx.screen)
    if listing is not None:
        what, getter, columns = listing
        records_table(as_list(fetch(what, getattr(session.api, getter), default=[])), columns)
    else:
        st.caption("Nothing here yet.")
    action_buttons(ctx)
