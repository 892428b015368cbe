import streamlit as st

from core.password_constants import MAX_LENGTH, MIN_LENGTH


def render():
    st.markdown("### 🔐 Smart Password Checker")

    st.markdown(
        f"""
A password is checked against five rules:

- at least **{MIN_LENGTH}** characters
- an uppercase letter (A-Z)
- a lowercase letter (a-z)
- a number (0-9)
- a special character (!@#$%...)

The generator builds passwords of {MIN_LENGTH} to {MAX_LENGTH} characters
that always meet all five.
"""
    )

    st.info("Pick **Password** in the **sidebar** to start.")
