"""
Key Parser - the single owner of the store's key convention.

Keys look like `<metric>_<seriesKey>_<millis>` for daily snapshots, where
millis is exactly 13 ASCII digits (dates between 2001 and 2286), and
`<metric>_<seriesKey>` for the scalar value of a series. Series keys are
lower-cased country names with whitespace replaced by "-" (`united-kingdom`,
`réunion`, `u.s.-virgin-islands`). They never contain an underscore.

A pattern scan for `cases_us*` also returns `cases_usa_...` keys; those
belong to another series and classify as malformed for `us`.
"""

import re
from typing import Union

from casetrend.models.enums import Metric
from casetrend.models.keys import KeyParseResult, MalformedKey, Number, ParsedKey, ScalarKey

from .errors import InvalidSeriesKeyError, ParseError

TIMESTAMP_DIGITS = 13

_TIMESTAMP_RE = re.compile(r"[0-9]{%d}" % TIMESTAMP_DIGITS)
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_WHITESPACE_RE = re.compile(r"\s")
_GLOB_SPECIAL_RE = re.compile(r"([*?\[\]\\])")


def normalize_series_key(raw: str) -> str:
    """
    Turn a requested key or display name into a store series key.

    Lower-cases and replaces every whitespace character with "-", so
    "United Kingdom" and "united-kingdom" address the same series. Accents and
    punctuation are kept as they are in the store.

    Raises:
        InvalidSeriesKeyError: If the result is empty or contains "_", the
            separator of the key convention
    """
    key = _WHITESPACE_RE.sub("-", raw.strip().lower())
    if not key or "_" in key:
        raise InvalidSeriesKeyError(f"Invalid series key: {raw!r}")
    return key


def key_prefix(metric: Union[Metric, str], series_key: str) -> str:
    """The scalar key of a series, which prefixes all of its daily keys."""
    return f"{Metric(metric).value}_{series_key}"


def escape_glob(text: str) -> str:
    """Escape Redis glob metacharacters ("myanmar-[burma]" -> "myanmar-\\[burma\\]")."""
    return _GLOB_SPECIAL_RE.sub(r"\\\1", text)


def scan_pattern(metric: Union[Metric, str], series_key: str) -> str:
    """Glob pattern matching the scalar key and all daily keys of a series."""
    return f"{escape_glob(key_prefix(metric, series_key))}*"


def daily_key(metric: Union[Metric, str], series_key: str, day: int) -> str:
    """Store key of one daily snapshot."""
    stamp = str(day)
    if not _TIMESTAMP_RE.fullmatch(stamp):
        raise ValueError(f"Day {day} is not a {TIMESTAMP_DIGITS}-digit millisecond timestamp")
    return f"{key_prefix(metric, series_key)}_{stamp}"


def parse_number(value: str) -> Number:
    """
    Parse a decimal counter value.

    Integral strings give an int, strings with a fractional part a float.

    Raises:
        ParseError: If the value is not a plain decimal number
    """
    text = value.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise ParseError(f"Not a decimal number: {value!r}")
    if "." in text:
        return float(text)
    return int(text)


def parse_entry(
    key: str,
    value: str,
    metric: Union[Metric, str],
    series_key: str,
) -> KeyParseResult:
    """
    Classify one raw store entry for a metric/series combination.

    Args:
        key: Full store key
        value: Raw string value
        metric: Metric prefix the entry is expected under
        series_key: Normalised series key

    Returns:
        ParsedKey for a daily snapshot with a numeric value, ScalarKey for the
        series' scalar key, MalformedKey for everything else
    """
    prefix = key_prefix(metric, series_key)

    if key == prefix:
        return ScalarKey(value=value)

    if not key.startswith(prefix + "_"):
        return MalformedKey(reason=f"key {key!r} does not belong to series {prefix!r}")

    stamp = key[len(prefix) + 1:]
    if not _TIMESTAMP_RE.fullmatch(stamp):
        return MalformedKey(
            reason=f"suffix {stamp!r} is not a {TIMESTAMP_DIGITS}-digit timestamp"
        )

    try:
        number = parse_number(value)
    except ParseError as e:
        return MalformedKey(reason=str(e), bad_value=True)

    return ParsedKey(day=int(stamp), value=number)
