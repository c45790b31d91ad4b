"""
UI strings. Every user-facing title and message goes through t().
"""

from locales.en import EN_STRINGS

DEFAULT_LANGUAGE = "en"

_STRINGS = {DEFAULT_LANGUAGE: EN_STRINGS}


def t(key: str, lang: str = DEFAULT_LANGUAGE, **kwargs) -> str:
    """
    Look up a string, then fill its {placeholders} from kwargs.
    Missing keys fall back to English, then to the key itself.
    """
    fallback = _STRINGS[DEFAULT_LANGUAGE].get(key, key)
    text = _STRINGS.get(lang, {}).get(key, fallback)
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except KeyError as e:
        raise KeyError(f"String '{key}' needs placeholder {e}") from e


def add_language(code: str, strings: dict) -> None:
    """Register translations. Repeated calls for one code merge, later values win."""
    _STRINGS.setdefault(code, {}).update(strings)
