"""
HKID core operations

主要组件:
- char_to_value / calculate_check_digit: 校验码计算
- HKIDPrefix / parse_prefix: 前缀分类
- HKIDSymbol / parse_symbol: 证件符号分类
- HKIDGenerator / generate_hkid: 生成测试用 HKID
- validate_hkid / parse_hkid: 校验 HKID
"""

from hkid_ops.core.check_digit import WEIGHTS, calculate_check_digit, char_to_value
from hkid_ops.core.prefix import (
    KNOWN_PREFIXES,
    HKIDPrefix,
    Prefix,
    UnknownPrefix,
    describe_prefix,
    is_known_prefix,
    parse_prefix,
)
from hkid_ops.core.symbol import (
    HKIDSymbol,
    IssuingOfficeCode,
    LostCard,
    Symbol,
    UnknownSymbol,
    parse_symbol,
)
from hkid_ops.core.generator import HKIDGenerator, generate_hkid, get_hkid_generator
from hkid_ops.core.validator import (
    ParsedHKID,
    format_hkid,
    is_valid_hkid,
    normalize_hkid,
    parse_hkid,
    validate_hkid,
)

__all__ = [
    "WEIGHTS",
    "char_to_value",
    "calculate_check_digit",
    "KNOWN_PREFIXES",
    "HKIDPrefix",
    "Prefix",
    "UnknownPrefix",
    "parse_prefix",
    "is_known_prefix",
    "describe_prefix",
    "HKIDSymbol",
    "IssuingOfficeCode",
    "LostCard",
    "Symbol",
    "UnknownSymbol",
    "parse_symbol",
    "HKIDGenerator",
    "generate_hkid",
    "get_hkid_generator",
    "ParsedHKID",
    "normalize_hkid",
    "parse_hkid",
    "validate_hkid",
    "is_valid_hkid",
    "format_hkid",
]
