# app.py
from pathlib import Path
import sys
import importlib
import logging
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.logging_utils import setup_logging  # noqa: E402
from core.settings import get_settings  # noqa: E402

settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)
logger = logging.getLogger("app")

# ==== Streamlit ====
st.set_page_config(
    page_title=settings.page_title,
    page_icon=settings.page_icon,
    layout="centered",
)

# ==== Pages ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "password_page":   "🔐 Password",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' has no render() function.")
    except Exception as e:
        logger.exception("Failed to import ui.%s", mod_name)
        errors.append(f"Failed to import 'ui.{mod_name}': {e}")

# Show errors but keep the remaining pages usable
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar ====
choice = st.sidebar.radio(" ", list(PAGES.keys()))
PAGES[choice]()
