"""Email sign-in and sign-up forms."""
import logging

import streamlit as st

from utils.validation import validate_email, validate_password, validate_required

logger = logging.getLogger(__name__)


def sign_in(ctx, session):
    with st.form("form_sign_in"):
        email = st.text_input("Email", key="sign_in_email")
        password = st.text_input("Password", type="password", key="sign_in_password")
        submitted = st.form_submit_button("Sign in", type="primary")

    if submitted:
        if not validate_email(email):
            st.error("Please enter a valid email address")
            return
        if not password:
            st.error("Password is required")
            return
        session.auth.sign_in(email.strip().lower())
        logger.info("User signed in")
        ctx.action("on_complete")()
        st.rerun()


def sign_up(ctx, session):
    with st.form("form_sign_up"):
        full_name = st.text_input("Full name", key="sign_up_name")
        email = st.text_input("Email", key="sign_up_email")
        password = st.text_input("Password", type="password", key="sign_up_password",
                                 help="At least 8 characters with upper and lower case letters and a number")
        submitted = st.form_submit_button("Create account", type="primary")

    if submitted:
        errors = validate_required(full_name, 'Full name').messages()
        if not validate_email(email):
            errors.append("Please enter a valid email address")
        check = validate_password(password or '')
        errors.extend(check.errors)
        if errors:
            for message in errors:
                st.error(message)
            return
        session.auth.sign_up(email.strip().lower(), full_name.strip())
        logger.info("User signed up")
        ctx.action("on_complete")()
        st.rerun()
