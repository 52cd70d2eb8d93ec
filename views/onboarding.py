import streamlit as st
from typing import List

from domain.constants import SPORTS, ROLES
from ui.components import profile_form
from views.common import as_list, fetch

DRAFT_KEY = 'onboarding_draft'


def view(ctx, session):
    st.header("Welcome to your league")
    st.caption("Two quick steps and you're in.")

    # Step 1: profile form if draft not present
    if DRAFT_KEY not in st.session_state:
        auth = session.auth.state()
        defaults = {'name': auth.user.display_name if auth.user else ''}
        draft = profile_form.render(defaults, key_prefix="onboarding")
        if draft is not None:
            st.session_state[DRAFT_KEY] = draft
            st.rerun()
        return

    draft = st.session_state[DRAFT_KEY]
    st.info(f"Profile saved: {draft['name']}" + (f" / {draft['phone']}" if draft['phone'] else ""))
    if st.button("◀ Edit profile"):
        del st.session_state[DRAFT_KEY]
        st.rerun()

    with st.form("form_role"):
        st.subheader("Step 2: Role & sports")
        role = st.radio("I am joining as a", ROLES, horizontal=True, key="onboarding_role",
                        format_func=str.title)
        sports: List[str] = st.multiselect("Sports", _sport_options(session), key="onboarding_sports")
        submitted = st.form_submit_button("Finish setup", type="primary")

    if submitted:
        if not sports:
            st.error("Pick at least one sport.")
            return
        # Stays on this screen if the backend rejects it; the toast says why
        ctx.action("on_complete")(role=role, sports=sports, profile=draft)
        if session.controller.state.onboarding_completed:
            st.session_state.pop(DRAFT_KEY, None)
            st.rerun()


def _sport_options(session) -> List[str]:
    rows = as_list(fetch("sports", session.api.get_sports, default=[]))
    names = [r.get('name') for r in rows if isinstance(r, dict) and r.get('name')]
    return names or SPORTS
