"""Simple two-language (bn/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "bn": "দৈনিক রাশিফল",
        "en": "Daily Horoscope",
    },
    "label_date": {
        "bn": "তারিখ",
        "en": "Date",
    },
    "label_place": {
        "bn": "স্থান",
        "en": "Location",
    },
    "label_health": {
        "bn": "স্বাস্থ্য",
        "en": "Health",
    },
    "label_advice": {
        "bn": "পরামর্শ",
        "en": "Advice",
    },
    "label_nakshatra": {
        "bn": "নক্ষত্র",
        "en": "Nakshatra",
    },
    "label_raw_json": {
        "bn": "JSON দেখুন",
        "en": "Raw JSON",
    },
    "tithi_label": {
        "bn": "তিথি {n}",
        "en": "Tithi {n}",
    },
    "heading": {
        "bn": "{date} রাশিফল",
        "en": "Horoscope for {date}",
    },
    "loading": {
        "bn": "লোড হচ্ছে...",
        "en": "Loading...",
    },
    "error_generate": {
        "bn": "রাশিফল তৈরি করা যায়নি।",
        "en": "Horoscope load failed.",
    },
}


def t(key: str, lang: str, **fields: object) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    Keyword arguments are substituted with str.format.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry.get("en") or key
    return text.format(**fields) if fields else text
