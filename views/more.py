import streamlit as st

from ui.components import action_buttons

SECTIONS = [
    ("My team", ["on_view_team", "on_manage_roster", "on_set_lineups", "on_view_analytics",
                 "on_view_team_chat", "on_view_practice_scheduler"]),
    ("League", ["on_view_my_standings", "on_view_division_standings", "on_view_personal_stats",
                "on_view_achievements", "on_view_player_directory", "on_view_photo_gallery"]),
    ("Account", ["on_view_dues_payment", "on_view_notifications", "on_view_settings",
                 "on_view_feedback", "on_view_association_admin"]),
]


def view(ctx, session):
    if ctx.user is not None:
        st.caption(f"Signed in as {ctx.user.email}")
    for title, names in SECTIONS:
        st.markdown(f"**{title}**")
        action_buttons(ctx, names)
    st.divider()
    action_buttons(ctx, ["on_sign_out"], columns=1)
