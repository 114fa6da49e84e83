import streamlit as st
from moodboard.config import APP_ICON, APP_TITLE, log_json, log_level
from moodboard.logging_config import setup_logging
from moodboard.ui import render_app

st.set_page_config(page_title=APP_TITLE, page_icon=APP_ICON, layout="wide")

def main():
    setup_logging(json_mode=log_json(), level=log_level())
    render_app()

if __name__ == "__main__":
    main()
