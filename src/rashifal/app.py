"""Rashifal — Streamlit page showing today's horoscope for all 12 signs.

Run with:
    streamlit run src/rashifal/app.py
"""

import json

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from rashifal.compute import client_address, run  # noqa: E402
from rashifal.config import Settings  # noqa: E402
from rashifal.errors import HoroscopeError  # noqa: E402
from rashifal.i18n import t  # noqa: E402
from rashifal.models import HoroscopeQuery  # noqa: E402
from rashifal.renderers.html import render_horoscope_html  # noqa: E402

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# The first run returns None; the rerun triggered by streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "bn" if _browser_lang.lower().startswith("bn") else "en"

_lang: str = st.session_state.get("lang", "bn")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🪄",
    layout="centered",
)

st.markdown(
    """
    <style>
    /* Hide streamlit_js_eval invisible iframe */
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, * {
        font-family: 'Segoe UI', Roboto, 'Noto Sans Bengali', sans-serif;
    }
    h1 { color: #f96d06 !important; }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Session state initialization ---
if "horoscope" not in st.session_state:
    st.session_state.horoscope = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

st.title(f"🪄 {t('page_title', _lang)}")

if st.session_state.horoscope is None and st.session_state.error_msg is None:
    _headers = st.context.headers
    _ip = client_address(_headers.get("X-Forwarded-For"), _headers.get("X-Real-Ip"))
    _tz = st.query_params.get("tz")
    with st.spinner(t("loading", _lang)):
        try:
            st.session_state.horoscope = run(
                HoroscopeQuery(client_ip=_ip, tz=_tz), settings=Settings.from_env()
            )
        except HoroscopeError:
            st.session_state.error_msg = t("error_generate", _lang)

if st.session_state.error_msg:
    st.error(st.session_state.error_msg)

_result = st.session_state.horoscope
if _result is not None:
    st.markdown(
        f"**{t('label_date', _lang)}:** {_result.date} — "
        f"**{t('label_place', _lang)}:** {_result.location.city}, {_result.location.country}"
    )
    st.markdown(render_horoscope_html(_result, lang=_lang), unsafe_allow_html=True)
    with st.expander(t("label_raw_json", _lang)):
        st.code(json.dumps(_result.to_dict(), ensure_ascii=False, indent=2), language="json")
