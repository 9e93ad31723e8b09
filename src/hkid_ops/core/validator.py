"""
HKID validation

Validates a full HKID (prefix + 6 digits + check character). The check
character may be wrapped in parentheses: "A123456(3)" and "A1234563" are
equivalent. Parentheses are dropped wherever they appear before the
structure is matched.
"""

from dataclasses import dataclass

from hkid_ops.core.check_digit import calculate_check_digit
from hkid_ops.core.patterns import HKID_FULL_PATTERN, strip_parentheses
from hkid_ops.core.prefix import Prefix, parse_prefix
from hkid_ops.exceptions import (
    CheckDigitCalculationError,
    HKIDError,
    InvalidHKIDFormatError,
    UnknownPrefixError,
)
from hkid_ops.logging.setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedHKID:
    """Structural parts of a full HKID."""

    prefix: str
    digits: str
    check_digit: str

    @property
    def body(self) -> str:
        return f"{self.prefix}{self.digits}"

    @property
    def prefix_info(self) -> Prefix:
        return parse_prefix(self.prefix)

    @property
    def expected_check_digit(self) -> str:
        expected = calculate_check_digit(self.body)
        if expected is None:
            raise CheckDigitCalculationError("Failed to calculate check digit")
        return expected

    @property
    def is_valid(self) -> bool:
        return self.expected_check_digit == self.check_digit

    def format(self, parenthesize: bool = True) -> str:
        if parenthesize:
            return f"{self.body}({self.check_digit})"
        return f"{self.body}{self.check_digit}"


def normalize_hkid(text: str) -> str:
    """Remove all parentheses; only the remaining characters are matched."""
    return strip_parentheses(text)


def parse_hkid(text: str) -> ParsedHKID:
    """Split a full HKID into prefix, digits and check character.

    The check digit is not verified here.

    Args:
        text: Full HKID, e.g. "A123456(3)".

    Returns:
        ParsedHKID with the captured parts.

    Raises:
        InvalidHKIDFormatError: If the text is not a well-formed HKID.
    """
    if not isinstance(text, str):
        raise InvalidHKIDFormatError("Invalid HKID format: expected a string.")

    cleaned = normalize_hkid(text)
    match = HKID_FULL_PATTERN.fullmatch(cleaned)
    if match is None:
        logger.debug(
            "HKID format rejected",
            extra={"event": "hkid_format_rejected", "length": len(text)},
        )
        raise InvalidHKIDFormatError("Invalid HKID format: incorrect structure.", value=text)

    prefix, digits, check_digit = match.groups()
    return ParsedHKID(prefix=prefix, digits=digits, check_digit=check_digit)


def validate_hkid(text: str, must_be_known: bool = False) -> bool:
    """Validate a full HKID.

    Args:
        text: Full HKID, with or without parentheses around the check digit.
        must_be_known: Require the prefix to be a known prefix.

    Returns:
        True if the check digit matches, False otherwise.

    Raises:
        InvalidHKIDFormatError: The text is not a well-formed HKID.
        UnknownPrefixError: ``must_be_known`` and the prefix is unknown.
        CheckDigitCalculationError: The check digit could not be computed.

    Examples:
        >>> validate_hkid("A123456(3)")
        True
        >>> validate_hkid("A123456(9)")
        False
    """
    parsed = parse_hkid(text)

    if must_be_known and not parsed.prefix_info.is_known():
        logger.debug(
            "HKID prefix not recognized",
            extra={"event": "hkid_unknown_prefix", "prefix": parsed.prefix},
        )
        raise UnknownPrefixError(parsed.prefix)

    valid = parsed.is_valid
    logger.debug(
        "HKID validated",
        extra={"event": "hkid_validated", "prefix": parsed.prefix, "valid": valid},
    )
    return valid


def is_valid_hkid(text: str, must_be_known: bool = False) -> bool:
    """Boolean form of ``validate_hkid``: any HKID error counts as invalid.

    Examples:
        >>> is_valid_hkid("A1234563")
        True
        >>> is_valid_hkid("not an hkid")
        False
    """
    try:
        return validate_hkid(text, must_be_known)
    except HKIDError:
        return False


def format_hkid(text: str, parenthesize: bool = True) -> str:
    """Render a well-formed HKID in canonical form.

    Raises:
        InvalidHKIDFormatError: If the text is not a well-formed HKID.

    Examples:
        >>> format_hkid("A1234563")
        'A123456(3)'
        >>> format_hkid("A123456(3)", parenthesize=False)
        'A1234563'
    """
    return parse_hkid(text).format(parenthesize)

