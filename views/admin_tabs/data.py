import streamlit as st
import pandas as pd

from services import admin as admin_svc


def render_data_tab(session):
    """Offline cache and queued writes on this device."""
    st.subheader("💾 Offline data")

    status = admin_svc.get_offline_status()
    with st.container(border=True):
        st.markdown("**Cached responses**")
        if status['cached']:
            st.dataframe(pd.DataFrame(status['cached']), hide_index=True, use_container_width=True)
        else:
            st.caption("Cache is empty.")

    with st.container(border=True):
        st.markdown("**Queued writes**")
        if status['queued']:
            st.dataframe(pd.DataFrame(status['queued']), hide_index=True, use_container_width=True)
            if st.button("Replay my queued requests"):
                user = session.auth.state().user
                result = session.api.replay_queued(user.id if user else None)
                st.success(f"Sent {result['sent']}, kept {result['kept']}, dropped {result['dropped']}.")
        else:
            st.caption("No queued writes.")

    with st.expander("🚨 Danger Zone: clear offline data"):
        st.warning("This deletes cached responses and any writes that have not reached the server yet.")
        if st.checkbox("I understand queued writes will be lost.", key="admin_reset_ack"):
            if st.button("Clear offline data", type="primary"):
                admin_svc.reset_offline_data()
                st.success("Offline data cleared.")
                st.rerun()
