from typing import Any, Optional
from feltreport.core.config import settings

DEFAULT_LOCALE = "en"

STRINGS = {
    "en": {
        "app_name": "Did You Feel It?",
        "num_people_felt_it": "{0:d} people felt it",
        "no_earthquake_data": "No earthquake data found",
    },
}

def get_string(key: str, *args: Any, locale: Optional[str] = None) -> str:
    """
    Look up a display string and format it with args.
    Unknown locales fall back to English; unknown keys raise KeyError.
    """
    table = STRINGS.get(locale or settings.LOCALE) or STRINGS[DEFAULT_LOCALE]
    template = table.get(key, STRINGS[DEFAULT_LOCALE][key])
    return template.format(*args) if args else template
