"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "황도 휠",
        "en": "Zodiac Wheel",
    },
    "label_date": {
        "ko": "날짜",
        "en": "Date",
    },
    "btn_now": {
        "ko": "지금",
        "en": "Now",
    },
    "toggle_traditional": {
        "ko": "전통 황도 (30° 균등)",
        "en": "Traditional zodiac (equal 30°)",
    },
    "convention_true": {
        "ko": "실제 황도 (IAU 경계)",
        "en": "True zodiac (IAU boundaries)",
    },
    "convention_traditional": {
        "ko": "전통 황도",
        "en": "Traditional zodiac",
    },
    "approximate": {
        "ko": "(근사 위치)",
        "en": "(approximate position)",
    },
    "degraded_notice": {
        "ko": "경계 근처에서 별자리 판정이 모호했던 경우: {count}회",
        "en": "Ambiguous sign classifications near a boundary: {count}",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
