"""
HKID generator

Generates syntactically valid HKID numbers with correct check digits, for
use as synthetic test data.

注意：生成的号码仅供测试使用，不代表任何真实签发的身份证。

The random source is injectable: any object with a ``randrange`` method
compatible with ``random.Random.randrange`` works, so tests can supply a
scripted source and assert exact output.
"""

import random
import secrets
import string
from typing import Optional

from hkid_ops.core.check_digit import calculate_check_digit
from hkid_ops.core.patterns import is_valid_prefix_format
from hkid_ops.core.prefix import KNOWN_PREFIXES, parse_prefix
from hkid_ops.exceptions import (
    CheckDigitCalculationError,
    InvalidHKIDFormatError,
    NoKnownPrefixesError,
    UnknownPrefixError,
)
from hkid_ops.logging.setup import get_logger

logger = get_logger(__name__)

# Number of serial digits following the prefix
DIGIT_COUNT = 6


class HKIDGenerator:
    """Generator of synthetic HKID numbers.

    Example:
        >>> gen = HKIDGenerator(rng=random.Random(7))
        >>> hkid = gen.generate("A", must_be_known=True)
        >>> hkid.startswith("A") and hkid.endswith(")")
        True
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        known_prefixes: Optional[tuple[str, ...]] = None,
        parenthesize: bool = True,
    ):
        """Initialize the generator.

        Args:
            rng: Random source. Defaults to ``secrets.SystemRandom()``.
            known_prefixes: Prefixes sampled when a known prefix is required
                and none is supplied. Defaults to all known prefixes.
            parenthesize: Whether to wrap the check digit in parentheses.
        """
        self.rng = rng if rng is not None else secrets.SystemRandom()
        self.known_prefixes = KNOWN_PREFIXES if known_prefixes is None else tuple(known_prefixes)
        self.parenthesize = parenthesize

    def generate(self, prefix: Optional[str] = None, must_be_known: bool = False) -> str:
        """Generate one HKID.

        Args:
            prefix: Prefix to use. If None, one is picked at random.
            must_be_known: Require the prefix to be a known prefix.

        Returns:
            HKID string, e.g. "A123456(3)".

        Raises:
            InvalidHKIDFormatError: ``prefix`` is not 1-2 uppercase letters.
            UnknownPrefixError: ``must_be_known`` and ``prefix`` is unknown.
            NoKnownPrefixesError: no known prefixes to sample from.
            CheckDigitCalculationError: the check digit could not be computed.
        """
        prefix_str = self._resolve_prefix(prefix, must_be_known)

        digits = "".join(str(self.rng.randrange(10)) for _ in range(DIGIT_COUNT))
        body = f"{prefix_str}{digits}"

        check_digit = calculate_check_digit(body)
        if check_digit is None:
            raise CheckDigitCalculationError(f"Failed to calculate check digit for prefix '{prefix_str}'")

        logger.debug(
            "Generated HKID",
            extra={"event": "hkid_generated", "prefix": prefix_str},
        )

        if self.parenthesize:
            return f"{body}({check_digit})"
        return f"{body}{check_digit}"

    def generate_many(
        self,
        count: int,
        prefix: Optional[str] = None,
        must_be_known: bool = False,
    ) -> list[str]:
        """Generate ``count`` HKIDs with the same options."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.generate(prefix, must_be_known) for _ in range(count)]

    def _resolve_prefix(self, prefix: Optional[str], must_be_known: bool) -> str:
        if prefix is not None:
            if not isinstance(prefix, str) or not is_valid_prefix_format(prefix):
                raise InvalidHKIDFormatError(
                    f"Prefix '{prefix}' is not a valid HKID prefix format "
                    "(must be 1 or 2 uppercase letters)",
                    value=prefix,
                )
            if must_be_known and not parse_prefix(prefix).is_known():
                raise UnknownPrefixError(prefix)
            return prefix

        if must_be_known:
            return self._random_known_prefix()
        return self._random_prefix()

    def _random_known_prefix(self) -> str:
        if not self.known_prefixes:
            raise NoKnownPrefixesError("No known prefixes to choose from")
        return self.known_prefixes[self.rng.randrange(len(self.known_prefixes))]

    def _random_prefix(self) -> str:
        # 1 or 2 letters with equal probability
        length = 1 + self.rng.randrange(2)
        return "".join(self._random_letter() for _ in range(length))

    def _random_letter(self) -> str:
        return string.ascii_uppercase[self.rng.randrange(26)]


_default_generator: Optional[HKIDGenerator] = None


def get_hkid_generator() -> HKIDGenerator:
    """Get the shared default generator."""
    global _default_generator
    if _default_generator is None:
        _default_generator = HKIDGenerator()
    return _default_generator


def generate_hkid(prefix: Optional[str] = None, must_be_known: bool = False) -> str:
    """Generate one HKID with the shared default generator.

    Example:
        >>> hkid = generate_hkid("WX", must_be_known=True)
        >>> hkid[:2]
        'WX'
    """
    return get_hkid_generator().generate(prefix, must_be_known)
