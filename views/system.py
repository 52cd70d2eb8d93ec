"""Screens outside the tab shell: loading, OAuth callback and debug."""
import streamlit as st
import pandas as pd

from ui.components import action_buttons


def loading(ctx, session):
    if session.last_error:
        st.warning(session.last_error)
        action_buttons(ctx, ["on_retry"], columns=1)
        return
    st.caption("⏳ Loading your league...")


def oauth_callback(ctx, session):
    st.header("Signing you in")
    state = session.auth.state()
    if state.is_authenticated:
        st.success(f"Signed in as {state.user.email}")
    else:
        st.info("Waiting for the identity provider to finish.")
    action_buttons(ctx, ["on_continue"], columns=1)


def debug(ctx, session):
    """Dump of routing and auth state, for support sessions."""
    nav = session.controller.state
    auth = session.auth.state()
    rows = [
        ("current_screen", nav.current_screen.value),
        ("active_tab", nav.active_tab.value),
        ("is_returning_user", nav.is_returning_user),
        ("user_role", nav.user_role),
        ("onboarding_completed", nav.onboarding_completed),
        ("params", dict(nav.params)),
        ("is_authenticated", auth.is_authenticated),
        ("auth_loading", auth.is_loading),
        ("user_id", auth.user.id if auth.user else None),
        ("synced_user_id", session.synced_user_id),
        ("last_error", session.last_error),
        ("api_base_url", session.api.base_url),
    ]
    st.dataframe(pd.DataFrame([(k, str(v)) for k, v in rows], columns=["key", "value"]),
                 hide_index=True, use_container_width=True)
    if session.current_user is not None:
        with st.expander("Current user"):
            st.json({
                'id': session.current_user.id,
                'email': session.current_user.email,
                'roles': list(session.current_user.roles),
                'onboardingCompleted': session.current_user.onboarding_completed,
                'fetchedAt': session.current_user.fetched_at,
            })
    action_buttons(ctx)
