"""
HKID check digit calculation

The check digit is the final character (0-9 or A) of an HKID. It is a
weighted sum mod 11 over the body, with the body left-padded to 8
positions by a space (value 36) when it carries a single-letter prefix.

Example:
    >>> calculate_check_digit("A123456")
    '3'
    >>> calculate_check_digit("AB123456")
    '9'
"""

from typing import Optional

from hkid_ops.core.patterns import is_valid_body_format


# Weights applied to the 8 padded body positions, left to right
WEIGHTS = [9, 8, 7, 6, 5, 4, 3, 2]

# Value of the padding space used for single-letter prefixes
SPACE_VALUE = 36

# Padded body width
BODY_WIDTH = 8


def char_to_value(c: str) -> Optional[int]:
    """Convert a single character to its HKID numeric value.

    Letters are case-folded first: A-Z map to 10-35, digits to 0-9 and a
    space to 36.

    Args:
        c: A single character.

    Returns:
        The numeric value, or None for any other character.

    Examples:
        >>> char_to_value("a")
        10
        >>> char_to_value(" ")
        36
        >>> char_to_value("-") is None
        True
    """
    if len(c) != 1 or not c.isascii():
        return None

    c = c.upper()
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if c == " ":
        return SPACE_VALUE
    return None


def calculate_check_digit(hkid_body: str) -> Optional[str]:
    """Calculate the check digit for an HKID body (prefix + 6 digits).

    Args:
        hkid_body: 7 or 8 uppercase letters or digits, e.g. "A123456".

    Returns:
        The check character ('0'-'9' or 'A'), or None if the body is
        not in the accepted format.
    """
    if not isinstance(hkid_body, str) or not is_valid_body_format(hkid_body):
        return None

    padded = hkid_body.rjust(BODY_WIDTH)

    total = 0
    for weight, char in zip(WEIGHTS, padded):
        value = char_to_value(char)
        if value is None:
            return None
        total += value * weight

    check = (11 - total % 11) % 11
    if check == 10:
        return "A"
    return str(check)
