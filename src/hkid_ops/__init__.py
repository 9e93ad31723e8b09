"""
HKID-OPS: Hong Kong Identity Card number operations

Check digit calculation, prefix and card symbol classification,
validation, and generation of synthetic HKID numbers for testing.
"""

__version__ = "0.3.1"

from hkid_ops.core.check_digit import calculate_check_digit, char_to_value
from hkid_ops.core.generator import HKIDGenerator, generate_hkid
from hkid_ops.core.prefix import KNOWN_PREFIXES, HKIDPrefix, UnknownPrefix, parse_prefix
from hkid_ops.core.symbol import HKIDSymbol, parse_symbol
from hkid_ops.core.validator import ParsedHKID, is_valid_hkid, parse_hkid, validate_hkid
from hkid_ops.exceptions import (
    CheckDigitCalculationError,
    HKIDError,
    InvalidHKIDFormatError,
    NoKnownPrefixesError,
    UnknownPrefixError,
)

__all__ = [
    "calculate_check_digit",
    "char_to_value",
    "HKIDGenerator",
    "generate_hkid",
    "KNOWN_PREFIXES",
    "HKIDPrefix",
    "UnknownPrefix",
    "parse_prefix",
    "HKIDSymbol",
    "parse_symbol",
    "ParsedHKID",
    "is_valid_hkid",
    "parse_hkid",
    "validate_hkid",
    "HKIDError",
    "InvalidHKIDFormatError",
    "UnknownPrefixError",
    "NoKnownPrefixesError",
    "CheckDigitCalculationError",
]
