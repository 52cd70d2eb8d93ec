import streamlit as st

from ui.components import action_buttons


def view(ctx, session):
    st.markdown("""<div style='padding:1.2rem 1.1rem; border-radius:10px; background:linear-gradient(135deg,#1d4ed8,#2563eb); color:white; margin-bottom:1.0rem;'>
    <div style='font-size:1.4rem; font-weight:700;'>Rally Connect</div>
    <div style='font-size:0.85rem; opacity:0.85;'>Schedules, standings and team chat for your rec league</div>
    </div>""", unsafe_allow_html=True)
    action_buttons(ctx, ["on_sign_up", "on_sign_in"])
