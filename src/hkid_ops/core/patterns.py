"""Compiled structural patterns shared by the HKID operations.

Patterns are compiled once at import time and only ever read afterwards.
Always match with ``fullmatch``: ``$`` would accept a trailing newline.
"""

import re


# One or two uppercase letters
PREFIX_PATTERN = re.compile(r"[A-Z]{1,2}")

# Prefix + six digits, 7 or 8 characters before padding
HKID_BODY_PATTERN = re.compile(r"[A-Z0-9]{7,8}")

# Prefix, digits and check character of a normalized HKID
HKID_FULL_PATTERN = re.compile(r"([A-Z]{1,2})([0-9]{6})([A0-9])")

_PARENTHESES = str.maketrans("", "", "()")


def is_valid_prefix_format(prefix: str) -> bool:
    """Check that ``prefix`` is one or two uppercase ASCII letters."""
    return bool(PREFIX_PATTERN.fullmatch(prefix))


def is_valid_body_format(body: str) -> bool:
    """Check that ``body`` is 7 or 8 uppercase ASCII letters or digits."""
    return bool(HKID_BODY_PATTERN.fullmatch(body))


def strip_parentheses(text: str) -> str:
    """Remove every ``(`` and ``)`` from ``text``, keeping the other characters in order.

    Examples:
        >>> strip_parentheses("A123456(3)")
        'A1234563'
        >>> strip_parentheses("A12(3456)3")
        'A1234563'
    """
    return text.translate(_PARENTHESES)
