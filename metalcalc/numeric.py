"""
Numeric input normalization.

Users type dimensions with whatever keyboard they have: Arabic-Indic digits,
the Arabic decimal separator, a decimal comma, thousands separators, stray
spaces. Everything is folded into a plain ASCII decimal string before it is
stored in the dimension map, and parsed leniently when a float is needed.
"""

import math
import re

ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
EASTERN_ARABIC_INDIC_DIGITS = "۰۱۲۳۴۵۶۷۸۹"

_DIGIT_MAP = {}
for _idx, _ch in enumerate(ARABIC_INDIC_DIGITS):
    _DIGIT_MAP[ord(_ch)] = str(_idx)
for _idx, _ch in enumerate(EASTERN_ARABIC_INDIC_DIGITS):
    _DIGIT_MAP[ord(_ch)] = str(_idx)

ARABIC_DECIMAL_SEPARATOR = "٫"

_WHITESPACE = re.compile(r"\s+")

# Longest leading float literal, same acceptance as a lenient parseFloat
_LEADING_FLOAT = re.compile(
    r"[+-]?(?:inf(?:inity)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)


def normalize_numeric_input(value) -> str:
    """
    Fold locale-formatted numeric text into a canonical ASCII string.

    - Arabic-Indic and Eastern Arabic-Indic digits map to 0-9
    - all whitespace is removed
    - the Arabic decimal separator becomes "."
    - commas become "." when the text has no dot (decimal comma),
      otherwise they are dropped as thousands separators

    None maps to "". Applying it twice changes nothing.
    """
    if value is None:
        return ""
    s = str(value).translate(_DIGIT_MAP)
    s = _WHITESPACE.sub("", s)
    s = s.replace(ARABIC_DECIMAL_SEPARATOR, ".")
    if "," in s and "." not in s:
        s = s.replace(",", ".")
    else:
        s = s.replace(",", "")
    return s


def to_number(value) -> float:
    """Parse user input as a float. Returns 0.0 for anything unparseable or not finite."""
    match = _LEADING_FLOAT.match(normalize_numeric_input(value))
    if not match:
        return 0.0
    try:
        number = float(match.group(0))
    except (ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def is_present(value) -> bool:
    """
    True when the input counts as filled in.

    "0" is present. Empty text and partial input such as "-" or "." are not.
    """
    return _LEADING_FLOAT.match(normalize_numeric_input(value)) is not None
