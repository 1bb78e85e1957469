"""HTML card renderer for a HoroscopeResponse.

Produces the same layout the embeddable widget (static/embed.js) builds in
the browser, for use with st.markdown(..., unsafe_allow_html=True) or any
server-side page.
"""

from __future__ import annotations

from html import escape

from rashifal.catalog import SIGN_NAMES_EN
from rashifal.i18n import t
from rashifal.models import HoroscopeResponse, SignHoroscope

_ACCENT = "#f96d06"
_CARD_BG = "#fffaf3"
_MUTED = "#666"


def _sign_heading(record: SignHoroscope, lang: str) -> str:
    if lang == "bn":
        return escape(record.sign)
    english = SIGN_NAMES_EN.get(record.sign)
    if english is None:
        return escape(record.sign)
    return f"{escape(record.sign)} ({escape(english)})"


def _render_sign(record: SignHoroscope, lang: str) -> str:
    return (
        '<div style="margin:10px 0;">'
        f"<strong>{_sign_heading(record, lang)}:</strong>"
        f'<div style="margin-left:8px">{escape(record.text)}</div>'
        f'<div style="color:{_MUTED};margin-top:4px">'
        f"<strong>{escape(t('label_health', lang))}:</strong> {escape(record.health)} <br/>"
        f"<strong>{escape(t('label_advice', lang))}:</strong> {escape(record.advice)}"
        "</div></div><hr/>"
    )


def render_horoscope_html(response: HoroscopeResponse, lang: str = "bn") -> str:
    """Return an HTML fragment with one card per sign.

    Every interpolated value is HTML-escaped.

    Args:
        response: Fully assembled horoscope.
        lang: Language code ('bn' or 'en') for labels. Content stays Bengali.

    Returns:
        HTML string (a single <div>).
    """
    loc = response.location
    heading = t("heading", lang, date=response.date)
    subtitle = (
        f"{escape(t('label_place', lang))}: {escape(loc.city)}, {escape(loc.country)}"
        f" · {escape(response.horoscope[0].tithi_label if response.horoscope else '')}"
        f" · {escape(t('label_nakshatra', lang))}: {escape(response.nakshatra)}"
    )
    parts = [
        '<div style="max-width:600px;margin:10px auto;padding:16px;border:1px solid #eee;'
        f"border-radius:10px;background:{_CARD_BG};font-family:Segoe UI, Roboto, sans-serif\">",
        f'<h3 style="text-align:center;color:{_ACCENT}">🪄 {escape(heading)}</h3>',
        f'<div style="text-align:center;color:{_MUTED};margin-bottom:8px">{subtitle}</div>',
    ]
    parts.extend(_render_sign(record, lang) for record in response.horoscope)
    parts.append("</div>")
    return "".join(parts)
