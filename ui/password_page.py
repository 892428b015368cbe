# ui/password_page.py
from __future__ import annotations
import json
import logging
from typing import Callable, Dict

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from core.generator_utils import generate
from core.password_constants import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from core.settings import get_settings
from core.strength_utils import (
    CRITERIA,
    STRENGTH_LEVELS,
    StrengthLevel,
    evaluate,
    feedback_text,
)

logger = logging.getLogger(__name__)

_PASSWORD_KEY = "password_input"
_GENERATED_KEY = "generated_password"
_JUST_GENERATED_KEY = "just_generated"

_NEUTRAL = "—"
_PASS = "✅"
_FAIL = "❌"


# ---------------- Helpers ----------------
def criteria_frame(password: str) -> pd.DataFrame:
    """Criteria table; statuses stay neutral while nothing has been typed."""
    result = evaluate(password)
    rows = []
    for c in CRITERIA:
        if not password:
            status = _NEUTRAL
        else:
            status = _PASS if c.key in result.passed else _FAIL
        rows.append({"Criterion": c.label, "Status": status})
    return pd.DataFrame(rows, columns=["Criterion", "Status"])


def gradient_css(level: StrengthLevel) -> str:
    start, end = level.colors
    return f"linear-gradient(90deg, {start}, {end})"


def _strength_bar(percent: float, level: StrengthLevel) -> str:
    return f"""
<div style="background:#e5e7eb;border-radius:6px;height:10px;width:100%;">
  <div style="width:{percent:.0f}%;height:10px;border-radius:6px;background:{gradient_css(level)};"></div>
</div>
"""


# ---------------- Page ----------------
def render() -> None:
    st.subheader("🔐 Password — Checker & Generator")

    sections: Dict[str, Callable[[], None]] = {
        "Checker": _checker_tab,
        "Generator": _generator_tab,
    }

    tabs = st.tabs(list(sections.keys()))
    for (name, fn), tab in zip(sections.items(), tabs):
        with tab:
            try:
                fn()
            except Exception as e:
                logger.exception("%s tab failed", name)
                st.error(f"{name} error: {e}")


# ---------------- Tabs ----------------
def _checker_tab() -> None:
    show_plain = st.checkbox("Show password", value=False)
    password = st.text_input(
        "Password",
        key=_PASSWORD_KEY,
        type="default" if show_plain else "password",
        placeholder="Type a password to check its strength",
    )

    if not password:
        st.markdown("**Strength:** Not evaluated")
        st.markdown(_strength_bar(0, STRENGTH_LEVELS[0]), unsafe_allow_html=True)
        st.dataframe(criteria_frame(""), width="stretch", hide_index=True)
        return

    result = evaluate(password)
    st.markdown(f"**Strength:** {result.level.text}")
    st.markdown(_strength_bar(result.percent, result.level), unsafe_allow_html=True)
    st.dataframe(criteria_frame(password), width="stretch", hide_index=True)

    if result.all_met:
        st.success(feedback_text(result))
    else:
        st.info(feedback_text(result))


def _on_generate(length: int) -> None:
    password = generate(length)
    st.session_state[_GENERATED_KEY] = password
    # Also check it in the Checker tab
    st.session_state[_PASSWORD_KEY] = password
    st.session_state[_JUST_GENERATED_KEY] = True
    logger.info("Generated password of length %d", len(password))


def _generator_tab() -> None:
    length = st.slider("Password length", MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH, 1)
    st.button(
        "🎲 Generate",
        type="primary",
        width="stretch",
        on_click=_on_generate,
        args=(length,),
    )

    if st.session_state.pop(_JUST_GENERATED_KEY, False):
        st.toast("✓ Password generated successfully!")

    password = st.session_state.get(_GENERATED_KEY, "")
    if not password:
        st.caption("Press **Generate** to create a password.")
        return

    result = evaluate(password)
    st.caption(f"Strength: **{result.level.text}** ({len(password)} characters)")
    _copy_widget(password, get_settings().notification_duration_ms)


def _copy_widget(password: str, duration_ms: int) -> None:
    payload = json.dumps(password).replace("</", "<\\/")
    components.html(
        f"""
<style>
  :root {{ color-scheme: light dark; }}
  .pw {{ font-family: ui-monospace,Consolas,Monaco,monospace; font-size: 16px; word-break: break-all; }}
  button.cpy {{
    background:#2563eb; border:none; color:#fff; padding:6px 10px; border-radius:6px; cursor:pointer;
  }}
  #note {{ margin-left: 8px; color:#16a34a; }}
  #note.error {{ color:#dc2626; }}
</style>

<div style="font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif;display:flex;gap:10px;align-items:center;">
  <span class="pw" id="pw"></span>
  <button class="cpy" id="copy">Copy</button>
  <span id="note"></span>
</div>

<script>
const password = {payload};
document.getElementById("pw").textContent = password;
const note = document.getElementById("note");
let timer = null;

function notify(message, isError) {{
  if (timer) clearTimeout(timer);
  note.textContent = message;
  note.className = isError ? "error" : "";
  timer = setTimeout(() => note.textContent = "", {int(duration_ms)});
}}

// Copy with fallback
function copyText(text) {{
  if (navigator.clipboard && window.isSecureContext) {{
    return navigator.clipboard.writeText(text);
  }}
  const ta = document.createElement('textarea');
  ta.value = text;
  ta.style.position = 'fixed';
  ta.style.opacity = '0';
  document.body.appendChild(ta);
  ta.focus();
  ta.select();
  try {{ document.execCommand('copy'); }}
  finally {{ document.body.removeChild(ta); }}
  return Promise.resolve();
}}

document.getElementById("copy").addEventListener("click", () => {{
  copyText(password)
    .then(() => notify("✓ Password copied to clipboard!", false))
    .catch(() => notify("❌ Failed to copy password", true));
}});
</script>
        """,
        height=60,
    )
