import os

DEFAULT_MODEL = "gemini-2.0-flash"


def api_key():
    # API_KEY is what the hosted deployment used
    return os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY") or ""


def model_name():
    return os.environ.get("AFRILEX_MODEL", DEFAULT_MODEL)


def ui_language():
    lang = os.environ.get("AFRILEX_LANG", "en").lower()
    return lang if lang in ("en", "fr") else "en"


def ui_theme():
    theme = os.environ.get("AFRILEX_THEME", "Light").capitalize()
    return theme if theme in ("Dark", "Light") else "Light"
