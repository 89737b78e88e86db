"""Locale projection for multilingual forum fields.

Titles and bodies are stored as ``{locale: text}`` maps. Read paths project
them to a single string for the requested locale, falling back to the
default locale and finally to ``None``.
"""
from typing import Mapping, Optional

from app.config import settings


def normalize_locale(lang: Optional[str]) -> str:
    """Lowercase and trim a ``lang`` query value; blank means the default locale."""
    if not lang or not lang.strip():
        return settings.DEFAULT_LOCALE
    return lang.strip().lower()


def resolve_localized(
    text: Optional[Mapping[str, str]],
    locale: Optional[str] = None,
    default_locale: Optional[str] = None,
) -> Optional[str]:
    """Pick the string for `locale`, else `default_locale`, else None.

    Empty strings count as missing. Never raises.
    """
    if not text or not isinstance(text, Mapping):
        return None
    if default_locale is None:
        default_locale = settings.DEFAULT_LOCALE
    for key in (locale, default_locale):
        if key is None:
            continue
        value = text.get(key)
        if isinstance(value, str) and value:
            return value
    return None
