import streamlit as st

from ui.components import action_buttons
from views.admin_tabs.analytics import render_analytics_tab
from views.admin_tabs.data import render_data_tab
from views.admin_tabs.directory import render_directory_tab


def view(ctx, session):
    st.markdown("League setup at a glance. Editing leagues and schedules happens in the back-office API.")
    action_buttons(ctx, ["on_exit"], columns=1)

    tabs = st.tabs(["📈 Overview", "🗂️ Directory", "💾 Offline data"])
    with tabs[0]:
        render_analytics_tab(session)
    with tabs[1]:
        render_directory_tab(session)
    with tabs[2]:
        render_data_tab(session)
