import streamlit as st
from typing import Dict, Any, Optional

from utils.validation import validate_profile_setup


def render(profile: Dict[str, Any], key_prefix: str) -> Optional[Dict[str, Any]]:
    """
    Renders the profile step of onboarding (name and phone).

    Args:
        profile (Dict[str, Any]): Values to prefill the form with.
        key_prefix (str): A unique prefix for Streamlit widget keys.

    Returns:
        Dict[str, Any]: The submitted profile, or None if not submitted or invalid.
    """
    with st.form(f"form_{key_prefix}"):
        st.subheader("Step 1: Your profile")
        name = st.text_input("Full name", value=profile.get('name', ''), key=f"{key_prefix}_name")
        phone = st.text_input("Phone (optional)", value=profile.get('phone', ''), key=f"{key_prefix}_phone",
                              placeholder="555-123-4567")

        submitted = st.form_submit_button("Next ➜ Role & sports")

        if submitted:
            result = validate_profile_setup(name, phone)
            if not result.is_valid:
                for message in result.messages():
                    st.error(message)
                return None

            return {
                'name': name.strip(),
                'phone': (phone or '').strip(),
            }

    return None
