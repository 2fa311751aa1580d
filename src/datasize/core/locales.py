"""
Locale resolution for parsing and formatting.

Locale data (symbols, decimal patterns) comes from Babel. When no locale is
given the process default is looked up again on every call, so parsers and
formatters follow runtime changes to LC_NUMERIC / LANG.
"""

from typing import Optional, Union

from babel import Locale, default_locale
from babel.core import UnknownLocaleError as BabelUnknownLocaleError

from datasize.core.errors import UnknownLocaleError
from datasize.core.logging import get_logger

log = get_logger(__name__)

FALLBACK_LOCALE = "en_US"

LocaleLike = Union[str, Locale]


def current_default_locale() -> Locale:
    """Return the process default numeric locale, falling back to en_US."""
    identifier = default_locale("LC_NUMERIC") or FALLBACK_LOCALE
    try:
        return Locale.parse(identifier)
    except (ValueError, BabelUnknownLocaleError):
        log.debug(f"Default locale {identifier!r} unusable, using {FALLBACK_LOCALE}")
        return Locale.parse(FALLBACK_LOCALE)


def resolve_locale(locale: Optional[LocaleLike]) -> Locale:
    """
    Turn a locale argument into a Babel Locale.

    Args:
        locale: A Babel Locale, an identifier like "de_DE" or "de-DE", or None
            for the current process default

    Returns:
        The resolved Locale

    Raises:
        UnknownLocaleError: If the identifier is not a known locale
    """
    if locale is None:
        return current_default_locale()
    if isinstance(locale, Locale):
        return locale

    try:
        return Locale.parse(str(locale).replace("-", "_"))
    except (ValueError, TypeError, BabelUnknownLocaleError) as exc:
        raise UnknownLocaleError(str(locale)) from exc
