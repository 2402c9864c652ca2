import logging
import os

import streamlit as st

logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING"))

# Set page configuration with a custom title and icon
st.set_page_config(page_title="Salary Tax Calculator", page_icon="💰")

st.subheader("Welcome!")


st.markdown("#### Please select the Tax Calculator page from the sidebar to get started.")
