"""
Number formatting for human-readable unit strings.

The unit families only decide the scale and the label; rendering the scaled number
is delegated to a formatter. A formatter is anything exposing format(value) -> str
(the NumberFormatter protocol), a plain callable taking a float, or a pattern string
in the CLDR decimal pattern syntax ("#,##0.#", "0.0#") which is rendered with Babel.

Also hosts the short type/value renderers used in exception messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache
from typing import Any, Callable, Protocol, runtime_checkable

# Third-party ----------------------------------------------------------------------------------------------------------
from babel import Locale, UnknownLocaleError
from babel.numbers import NumberPattern, format_decimal, parse_pattern


# @formatter:off

class FormatConf:
    """
    Default configuration constants for number formatting.

    Attributes:
        DEFAULT_PATTERN: Group integer digits by thousands, at most one fractional digit,
                         no fractional part when it is zero.
        DEFAULT_LOCALE:  Locale whose symbols (grouping, decimal point) render the pattern.
        MAX_REPR:        Longest value repr shown in exception messages.
    """
    DEFAULT_PATTERN = "#,##0.#"
    DEFAULT_LOCALE = "en_US"
    MAX_REPR = 80

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class NumberFormatter(Protocol):
    """Protocol for objects rendering a float as text."""

    def format(self, value: float) -> str: ...


@dataclass(frozen=True)
class DecimalFormat:
    """
    Pattern-based number formatter backed by Babel.

    Patterns use the CLDR/java.text.DecimalFormat syntax: '#' optional digit, '0' required
    digit, ',' grouping, '.' decimal separator. Symbols come from the locale, so the same
    pattern renders 1.18 as "1.18" in en_US and "1,18" in fr.

    Rounding is half-even, as in the pattern syntax it mirrors.

    Examples:
        >>> DecimalFormat("#,##0.#").format(9223.372)
        '9,223.4'
        >>> DecimalFormat("0.0#").format(16.0)
        '16.0'
        >>> DecimalFormat("#.##", locale="fr").format(1.17737)
        '1,18'
    """

    pattern: str
    locale: str | Locale = FormatConf.DEFAULT_LOCALE

    _number_pattern: NumberPattern = field(init=False, repr=False, compare=False)
    _locale: Locale = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.pattern, str):
            raise TypeError(f"pattern must be a str, got {fmt_type(self.pattern)}")
        if not self.pattern:
            raise ValueError("pattern must be a non-empty string")

        try:
            number_pattern = parse_pattern(self.pattern)
        except ValueError as e:
            raise ValueError(f"invalid number pattern {fmt_value(self.pattern)}: {e}") from e

        try:
            locale = Locale.parse(self.locale)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            raise ValueError(f"unknown locale {fmt_value(self.locale)}: {e}") from e

        object.__setattr__(self, '_number_pattern', number_pattern)
        object.__setattr__(self, '_locale', locale)

    def format(self, value: float) -> str:
        """
        Render value with this pattern and locale.

        Floats are rounded half-even on their exact binary value, so 1.05 (stored as
        1.0500000000000000444...) renders as "1.1" under "#,##0.#".
        """
        if isinstance(value, float):
            value = Decimal(value)
        return format_decimal(value, format=self._number_pattern, locale=self._locale)


DEFAULT_FORMAT = DecimalFormat(FormatConf.DEFAULT_PATTERN)


# Methods --------------------------------------------------------------------------------------------------------------

def resolve_formatter(fmt: "str | NumberFormatter | Callable[[float], str] | None" = None) -> Callable[[float], str]:
    """
    Resolve a formatter argument to a callable rendering a float.

    Args:
        fmt: None for the default "#,##0.#" formatter, a pattern string,
             a NumberFormatter instance, or a callable float -> str.

    Returns:
        A callable taking the scaled value and returning its text.

    Raises:
        TypeError: If fmt is none of the supported kinds.
        ValueError: If fmt is an invalid pattern string.
    """
    if fmt is None:
        return DEFAULT_FORMAT.format

    # str has a .format method too, so patterns are checked before the protocol
    if isinstance(fmt, str):
        return _pattern_format(fmt).format

    if isinstance(fmt, NumberFormatter):
        return fmt.format

    if callable(fmt):
        return fmt

    raise TypeError(
        f"formatter must be a pattern str, a NumberFormatter or a callable, got {fmt_type(fmt)}"
    )


def fmt_type(obj: Any) -> str:
    """
    Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(int)
        '<int>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return f"<{cls.__name__}>"


def fmt_value(obj: Any, *, max_repr: int = FormatConf.MAX_REPR) -> str:
    """
    Format a value as a type-value pair for exception messages.

    Handles broken __repr__ and truncates long reprs.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("x" * 100, max_repr=8)
        "<str: 'xxxx...>"
    """
    try:
        repr_ = repr(obj)
    except Exception as e:
        repr_ = f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"

    if len(repr_) > max_repr:
        repr_ = repr_[:max(max_repr - 3, 1)] + "..."

    return f"<{type(obj).__name__}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

@lru_cache(maxsize=64)
def _pattern_format(pattern: str) -> DecimalFormat:
    """Cached DecimalFormat for a pattern in the default locale."""
    return DecimalFormat(pattern)
