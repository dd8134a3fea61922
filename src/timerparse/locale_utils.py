"""Locale utilities: normalization, Babel lookups, and locale profiles.

Centralizes locale format normalization and everything the parser needs to
know about a locale:
- the field order of its short date format (month-first, year-first or
  day-first), which decides how ambiguous numeric dates such as "02/03" read
- its decimal symbol, which duration numbers ("1.5 hours", "1,5 hours") use

Unknown locale codes fall back to DEFAULT_LOCALE with a warning rather than
failing the parse.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

import regex
from babel import Locale, UnknownLocaleError
from babel.numbers import (
    NumberFormatError,
    format_decimal,
    get_decimal_symbol,
    parse_decimal,
)

from .constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from .diagnostics import ErrorTemplate, TimerFormatError
from .enums import DateOrder

__all__ = [
    "LocaleProfile",
    "classify_date_pattern",
    "clear_locale_cache",
    "format_number",
    "get_babel_locale",
    "get_date_order",
    "get_locale_profile",
    "get_system_locale",
    "normalize_locale",
    "parse_number",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

_MONTH_FIRST = regex.compile(r"^.*M.*d.*y.*$")
_YEAR_FIRST = regex.compile(r"^.*y.*M.*d.*$")
_QUOTED_LITERAL = regex.compile(r"'[^']*'")

# Plain decimal rendering: no grouping separators. Fraction digits are not
# quantized, so every digit of the shortest float repr survives.
_NUMBER_FORMAT = "0.#"


@dataclass(frozen=True, slots=True)
class LocaleProfile:
    """Locale facts consumed by the grammars.

    Attributes:
        locale_code: Normalized, Babel-resolvable locale code
        date_order: Field order of the locale's short date format
        decimal_symbol: Decimal separator for duration numbers
    """

    locale_code: str
    date_order: DateOrder
    decimal_symbol: str


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-GB")
        'en_GB'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL, LC_TIME, LANG environment variables

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Returns:
        Detected locale code in POSIX format, or DEFAULT_LOCALE when none
        can be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except ValueError:
        system_locale = None
    if system_locale and system_locale not in ("C", "POSIX"):
        return normalize_locale(system_locale.split(".")[0])

    for var in ("LC_ALL", "LC_TIME", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            return normalize_locale(value.split(".")[0])

    return DEFAULT_LOCALE


def resolve_locale(locale_code: str | None) -> str:
    """Return a Babel-resolvable locale code.

    Args:
        locale_code: Requested locale, or None for the system locale

    Returns:
        The normalized code when Babel knows it, otherwise DEFAULT_LOCALE
    """
    code = normalize_locale(locale_code) if locale_code else get_system_locale()
    try:
        get_babel_locale(code)
    except (UnknownLocaleError, ValueError):
        logger.warning("Unknown locale '%s', falling back to '%s'", code, DEFAULT_LOCALE)
        return DEFAULT_LOCALE
    return code


def classify_date_pattern(pattern: str) -> DateOrder:
    """Classify a CLDR date pattern by field order.

    Args:
        pattern: Date pattern such as "M/d/yy" or "dd.MM.yy"

    Returns:
        MONTH_FIRST for M..d..y, YEAR_FIRST for y..M..d, else DAY_FIRST

    Example:
        >>> classify_date_pattern("M/d/yy")
        <DateOrder.MONTH_FIRST: 'month_first'>
        >>> classify_date_pattern("y/MM/dd")
        <DateOrder.YEAR_FIRST: 'year_first'>
    """
    fields = _QUOTED_LITERAL.sub("", pattern)
    if _MONTH_FIRST.match(fields):
        return DateOrder.MONTH_FIRST
    if _YEAR_FIRST.match(fields):
        return DateOrder.YEAR_FIRST
    return DateOrder.DAY_FIRST


def get_date_order(locale_code: str | None) -> DateOrder:
    """Date order of a locale's short date format.

    Args:
        locale_code: Locale code, or None for the system locale

    Returns:
        The locale's DateOrder
    """
    return get_locale_profile(locale_code).date_order


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_locale_profile(locale_code: str | None) -> LocaleProfile:
    """Build the cached LocaleProfile for a locale.

    Args:
        locale_code: Locale code, or None for the system locale

    Returns:
        LocaleProfile for the resolved locale
    """
    code = resolve_locale(locale_code)
    babel_locale = get_babel_locale(code)
    short_pattern = babel_locale.date_formats["short"].pattern
    profile = LocaleProfile(
        locale_code=code,
        date_order=classify_date_pattern(short_pattern),
        decimal_symbol=get_decimal_symbol(babel_locale),
    )
    logger.debug("Locale profile for '%s': %s", code, profile)
    return profile


def parse_number(text: str, profile: LocaleProfile) -> float:
    """Parse a locale-formatted number.

    Args:
        text: Digits with an optional locale decimal symbol
        profile: Active locale profile

    Returns:
        The parsed value

    Raises:
        TimerFormatError: If Babel cannot read the number
    """
    try:
        value = parse_decimal(text, locale=get_babel_locale(profile.locale_code))
    except (NumberFormatError, InvalidOperation) as e:
        raise TimerFormatError(
            ErrorTemplate.number_invalid(text, profile.locale_code),
            input_value=text,
            locale_code=profile.locale_code,
            parse_type="number",
        ) from e
    return float(value)


def format_number(value: float, locale_code: str) -> str:
    """Render a number with the locale decimal symbol and no grouping.

    Args:
        value: Number to render
        locale_code: Resolved locale code

    Returns:
        Rendered number, e.g. "1.5" (en) or "1,5" (de)
    """
    return format_decimal(
        Decimal(repr(value)),
        format=_NUMBER_FORMAT,
        locale=get_babel_locale(locale_code),
        decimal_quantization=False,
    )


def clear_locale_cache() -> None:
    """Clear cached Babel locales and locale profiles."""
    get_babel_locale.cache_clear()
    get_locale_profile.cache_clear()
