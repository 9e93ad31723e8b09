"""
HKID prefix classification

One or two letter codes at the start of an HKID indicate the issuing
office, the era of issue or a special status. Known codes are members of
``HKIDPrefix``; anything else parses to ``UnknownPrefix`` which keeps the
original text.

Matching is exact and case-sensitive: "a" is an unknown prefix.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


_PRE_1983_NON_CHINESE = "Persons without Chinese names issued before 27 Mar 1983"


class HKIDPrefix(str, Enum):
    """Known HKID prefixes.

    Example:
        >>> HKIDPrefix.parse("A") is HKIDPrefix.A
        True
        >>> HKIDPrefix.parse("ZZ")
        UnknownPrefix(text='ZZ')
    """

    def __new__(cls, code: str, description: str):
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.description = description
        return obj

    # Single-letter prefixes
    A = ("A", "Original ID cards, issued between 1949 and 1962, most holders born before 1950")
    B = ("B", "Issued between 1955 and 1960 in city offices")
    C = ("C", "Issued between 1960 and 1983 in NT offices, mostly HK-born children (1946-1971)")
    D = ("D", "Issued between 1960 and 1983 at HK Island offices, mostly HK-born children")
    E = ("E", "Issued between 1955 and 1969 in Kowloon offices, mostly HK-born children (1946-1962)")
    F = ("F", "First issue of a card commencing from 24 February 2020")
    G = ("G", "Issued between 1967 and 1983 in Kowloon offices, children born 1956-1971")
    H = ("H", "Issued between 1979 and 1983 in HK Island offices, children born 1968-1971")
    J = ("J", "Consular officers")
    K = ("K", "First issue (1983 - 1990), children born 1972-1979")
    L = ("L", "Issued between 1983 and 2003 during computer malfunctions, very few holders")
    M = ("M", "First issue (2011 - 23 Feb 2020)")
    N = ("N", "Birth registered in Hong Kong after 1 June 2019")
    P = ("P", "First issue (1990 - 2000), children mostly born July-Dec 1979")
    R = ("R", "First issue (2000 - 2011)")
    S = ("S", "Birth registered in Hong Kong (1 Apr 2005 - 31 May 2019)")
    T = ("T", "Issued between 1983 and 1997 during computer malfunctions, very few holders")
    V = ("V", 'Child under 11 issued "Document of Identity for Visa Purposes" (1983 - 2003)')
    W = ("W", "First issue to foreign laborer/domestic helper (10 Nov 1989 - 1 Jan 2009)")
    Y = ("Y", "Birth registered in Hong Kong (1 Jan 1989 - 31 Mar 2005)")
    Z = ("Z", "Birth registered in Hong Kong (1 Jan 1980 - 31 Dec 1988)")

    # Double-letter prefixes
    EC = ("EC", "European Community officers and dependents (1993 - 2003)")
    WX = ("WX", "Foreign laborers/domestic helpers issued since 2 Jan 2009")
    XA = ("XA", _PRE_1983_NON_CHINESE)
    XB = ("XB", _PRE_1983_NON_CHINESE)
    XC = ("XC", _PRE_1983_NON_CHINESE)
    XD = ("XD", _PRE_1983_NON_CHINESE)
    XE = ("XE", _PRE_1983_NON_CHINESE)
    XG = ("XG", _PRE_1983_NON_CHINESE)
    XH = ("XH", _PRE_1983_NON_CHINESE)

    @classmethod
    def parse(cls, text: str) -> Union["HKIDPrefix", "UnknownPrefix"]:
        """Classify a prefix string. Never fails."""
        return parse_prefix(text)

    @property
    def code(self) -> str:
        return self._value_

    def is_known(self) -> bool:
        return True

    def as_str(self) -> str:
        return self._value_

    def __str__(self) -> str:
        return self._value_


@dataclass(frozen=True)
class UnknownPrefix:
    """A prefix that is not one of the known codes."""

    text: str

    @property
    def code(self) -> str:
        return self.text

    @property
    def description(self) -> Optional[str]:
        return None

    def is_known(self) -> bool:
        return False

    def as_str(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


Prefix = Union[HKIDPrefix, UnknownPrefix]

# All known prefix codes, in table order
KNOWN_PREFIXES: tuple[str, ...] = tuple(p.value for p in HKIDPrefix)

_BY_CODE: dict[str, HKIDPrefix] = {p.value: p for p in HKIDPrefix}


def parse_prefix(text: str) -> Prefix:
    """Classify a prefix string.

    Args:
        text: Candidate prefix, e.g. "A" or "WX".

    Returns:
        The matching ``HKIDPrefix`` member, or ``UnknownPrefix(text)``.
    """
    known = _BY_CODE.get(text)
    if known is not None:
        return known
    return UnknownPrefix(text)


def is_known_prefix(text: str) -> bool:
    """Check whether ``text`` is exactly one of the known prefix codes."""
    return text in _BY_CODE


def describe_prefix(text: str) -> Optional[str]:
    """Return the description for a known prefix, or None."""
    return parse_prefix(text).description
