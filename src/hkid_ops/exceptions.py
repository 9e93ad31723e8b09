"""Exceptions raised by HKID operations.

Pure computations (check digit, character values) signal failure with
``None``. Operations that validate or generate raise one of these.
"""

from typing import Optional


class HKIDError(ValueError):
    """Base class for all HKID errors."""


class InvalidHKIDFormatError(HKIDError):
    """Input does not match the required HKID structure."""

    def __init__(self, message: str, value: Optional[str] = None) -> None:
        super().__init__(message)
        self.value = value


class UnknownPrefixError(HKIDError):
    """Prefix is well-formed but not one of the known prefixes."""

    def __init__(self, prefix: str) -> None:
        super().__init__(f"Prefix '{prefix}' is not recognized")
        self.prefix = prefix


class NoKnownPrefixesError(HKIDError):
    """There are no known prefixes to choose from."""


class CheckDigitCalculationError(HKIDError):
    """Check digit could not be computed for an already-validated body."""
