import streamlit as st
import pandas as pd
from typing import Dict, Any, Iterable, List, Optional

from .base import status_badge


def _team_name(side: Any) -> str:
    if isinstance(side, dict):
        return side.get('name') or '—'
    return str(side or '—')


def match_card(match: Dict[str, Any], on_open=None, key: Optional[str] = None):
    """
    Displays a card with a single match: teams, time, venue and status.
    """
    home = _team_name(match.get('homeTeam') or match.get('home_team'))
    away = _team_name(match.get('awayTeam') or match.get('away_team'))
    when = match.get('scheduledAt') or match.get('date') or 'TBD'
    venue = match.get('location') or match.get('venue') or ''
    with st.container(border=True):
        top = st.columns([6, 2])
        top[0].markdown(f"**{home}** vs **{away}**")
        top[1].markdown(status_badge(match.get('status', 'Scheduled')), unsafe_allow_html=True)
        st.caption(f"{when}  {('· ' + venue) if venue else ''}")
        if on_open is not None:
            st.button("Details", key=key or f"match_{match.get('id')}", on_click=on_open,
                      kwargs={'match_id': match.get('id')})


def team_card(team: Dict[str, Any], on_open=None, key: Optional[str] = None):
    with st.container(border=True):
        c1, c2 = st.columns([6, 2])
        c1.markdown(f"**{team.get('name', 'Team')}**")
        sport = team.get('sport')
        if isinstance(sport, dict):
            sport = sport.get('name')
        c1.caption(" · ".join(x for x in [sport, team.get('club') or team.get('division')] if x))
        if on_open is not None:
            c2.button("Open", key=key or f"team_{team.get('id')}", on_click=on_open,
                      kwargs={'team_id': team.get('id')})


def records_table(rows: Iterable[Dict[str, Any]], columns: Optional[List[str]] = None):
    """Render API rows as a dataframe; nested objects are shown by their name."""
    df = pd.DataFrame(list(rows))
    if df.empty:
        st.caption("Nothing to show yet.")
        return
    for col in df.columns:
        df[col] = df[col].apply(lambda v: v.get('name', v.get('id')) if isinstance(v, dict) else v)
    if columns:
        df = df[[c for c in columns if c in df.columns]]
    st.dataframe(df, hide_index=True, use_container_width=True)
