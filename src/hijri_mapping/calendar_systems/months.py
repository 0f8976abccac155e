"""Hijri month names."""

from typing import Dict, List

HIJRI_MONTH_NAMES: Dict[str, List[str]] = {
    "en": [
        "Muharram",
        "Safar",
        "Rabi' al-awwal",
        "Rabi' al-thani",
        "Jumada al-awwal",
        "Jumada al-thani",
        "Rajab",
        "Sha'ban",
        "Ramadan",
        "Shawwal",
        "Dhu al-Qi'dah",
        "Dhu al-Hijjah",
    ],
    "ar": [
        "محرم",
        "صفر",
        "ربيع الأول",
        "ربيع الثاني",
        "جمادى الأولى",
        "جمادى الآخرة",
        "رجب",
        "شعبان",
        "رمضان",
        "شوال",
        "ذو القعدة",
        "ذو الحجة",
    ],
    "ur": [
        "محرم",
        "صفر",
        "ربیع الاول",
        "ربیع الثانی",
        "جمادی الاول",
        "جمادی الثانی",
        "رجب",
        "شعبان",
        "رمضان",
        "شوال",
        "ذیقعد",
        "ذی الحجہ",
    ],
}


def get_hijri_month_names(language: str = "en") -> List[str]:
    """Get the twelve month names for a language, English if unknown."""
    return list(HIJRI_MONTH_NAMES.get(language, HIJRI_MONTH_NAMES["en"]))


def get_hijri_month_name(month: int, language: str = "en") -> str:
    """Get localized month name.

    Out-of-range months yield ``"Month {n}"`` instead of raising, since the
    result is only ever displayed.
    """
    month_names = HIJRI_MONTH_NAMES.get(language, HIJRI_MONTH_NAMES["en"])

    if 1 <= month <= len(month_names):
        return month_names[month - 1]

    return f"Month {month}"
