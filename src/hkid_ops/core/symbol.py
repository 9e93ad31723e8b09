"""
HKID card symbols

Symbols printed on the physical card below the HKID number denote re-entry
eligibility, right of abode, place of birth, the issuing office or how many
times the card has been reported lost. They are independent of the check
digit.

Parsing order (first match wins):
1. One of the 13 fixed codes ("***", "*", "A", "B", ...)
2. "L" followed by a count, e.g. "L2" -> ``LostCard(2)``
3. Two characters with a digit second, e.g. "H1" -> ``IssuingOfficeCode("H1")``
4. Anything else -> ``UnknownSymbol(text)``
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


# Largest lost-card count that is still classified as LostCard
MAX_LOST_CARD_COUNT = 255


class HKIDSymbol(Enum):
    """Fixed HKID card symbols.

    Each member carries the literal ``symbol`` printed on the card and a
    ``message`` describing it.
    """

    def __new__(cls, symbol: str, message: str):
        obj = object.__new__(cls)
        obj._value_ = symbol
        obj.message = message
        return obj

    ADULT_ELIGIBLE_REENTRY_PERMIT = (
        "***",
        "The holder is aged 18 or over and eligible for a Hong Kong Re-entry Permit",
    )
    YOUTH_ELIGIBLE_REENTRY_PERMIT = (
        "*",
        "The holder is aged between 11 and 17 and eligible for a Hong Kong Re-entry Permit",
    )
    RIGHT_OF_ABODE = ("A", "The holder has the right of abode in Hong Kong")
    BIRTH_DATE_OR_PLACE_CHANGED = (
        "B",
        "The holder's reported date/place of birth has changed since first registration",
    )
    STAY_LIMITED_BY_IMMIGRATION = (
        "C",
        "The holder's stay in Hong Kong is limited by the Director of Immigration at registration",
    )
    NAME_CHANGED = ("N", "The holder's reported name has changed since first registration")
    BORN_OUTSIDE_HK_CHINA_MACAU = (
        "O",
        "The holder was born outside Hong Kong, Mainland China, or Macau",
    )
    RIGHT_TO_LAND = ("R", "The holder has the right to land in Hong Kong")
    STAY_UNLIMITED_BY_IMMIGRATION = (
        "U",
        "The holder's stay in Hong Kong is not limited by the Director of Immigration",
    )
    BORN_IN_MACAU = ("W", "The holder's reported place of birth is Macau")
    BORN_IN_MAINLAND_CHINA = ("X", "The holder's reported place of birth is Mainland China")
    BIRTH_DATE_CONFIRMED = (
        "Y",
        "The holder's date of birth has been confirmed by birth certificate or passport",
    )
    BORN_IN_HONG_KONG = ("Z", "The holder's reported place of birth is Hong Kong")

    @classmethod
    def parse(cls, text: str) -> "Symbol":
        """Classify a card symbol. Never fails."""
        return parse_symbol(text)

    @property
    def symbol(self) -> str:
        return self._value_

    def is_known(self) -> bool:
        return True


@dataclass(frozen=True)
class IssuingOfficeCode:
    """Code of the office that issued the card, e.g. "H1" or "K2"."""

    code: str

    symbol = "<Office Code>"
    message = "Issuing office code (e.g., H1, K2, S1, P1, V1, etc.)"

    def is_known(self) -> bool:
        return True


@dataclass(frozen=True)
class LostCard:
    """Number of times the holder has reported the card lost ("L1", "L2", ...)."""

    times: int

    symbol = "<L#>"
    message = "The holder has lost their ID card. 'L1' for once, 'L2' for twice, etc."

    def is_known(self) -> bool:
        return True


@dataclass(frozen=True)
class UnknownSymbol:
    """A symbol that matches none of the known shapes."""

    text: str

    symbol = "<Unknown>"
    message = "Unknown or custom symbol"

    def is_known(self) -> bool:
        return False


Symbol = Union[HKIDSymbol, IssuingOfficeCode, LostCard, UnknownSymbol]

_BY_SYMBOL: dict[str, HKIDSymbol] = {s.value: s for s in HKIDSymbol}


def _parse_lost_count(rest: str) -> int | None:
    # An explicit plus sign is allowed: "L+5" is the same as "L5"
    digits = rest[1:] if rest.startswith("+") else rest
    if not (digits.isascii() and digits.isdigit()):
        return None
    times = int(digits)
    if times > MAX_LOST_CARD_COUNT:
        return None
    return times


def parse_symbol(text: str) -> Symbol:
    """Classify a card symbol string.

    Args:
        text: Symbol as printed on the card.

    Returns:
        The matching symbol variant. Unrecognized text yields
        ``UnknownSymbol(text)``.

    Examples:
        >>> parse_symbol("***")
        <HKIDSymbol.ADULT_ELIGIBLE_REENTRY_PERMIT: '***'>
        >>> parse_symbol("L2")
        LostCard(times=2)
        >>> parse_symbol("H1")
        IssuingOfficeCode(code='H1')
    """
    fixed = _BY_SYMBOL.get(text)
    if fixed is not None:
        return fixed

    if text.startswith("L") and len(text) > 1:
        times = _parse_lost_count(text[1:])
        if times is None:
            return UnknownSymbol(text)
        return LostCard(times)

    if len(text) == 2 and text[1].isascii() and text[1].isdigit():
        return IssuingOfficeCode(text)

    return UnknownSymbol(text)
