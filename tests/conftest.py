"""Pytest fixtures and configuration."""

import pytest


class ScriptedRandom:
    """Random source that returns pre-scripted ``randrange`` results."""

    def __init__(self, values):
        self._values = list(values)
        self.bounds = []

    def randrange(self, stop):
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        value = self._values.pop(0)
        assert 0 <= value < stop, f"scripted value {value} out of range({stop})"
        self.bounds.append(stop)
        return value

    @property
    def remaining(self):
        return len(self._values)


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def valid_hkids():
    """HKIDs with correct check digits."""
    return [
        "A123456(3)",
        "A1234563",
        "AB123456(9)",
        "WX123456(9)",
        "C668668(9)",
        "G123456(A)",   # check digit 10 -> A
        "A123458(A)",
        "XX123456(0)",  # unknown prefix, check digit 0
        "ZZ123456(A)",
    ]


@pytest.fixture
def invalid_hkids():
    """HKIDs that are well-formed but carry the wrong check digit."""
    return [
        "A123456(9)",
        "AB123456(1)",
        "G123456(0)",
        "ZZ123456(8)",
    ]


@pytest.fixture
def malformed_hkids():
    """Strings that must be rejected by format matching."""
    return [
        "",
        "A12345",          # too short
        "A123456",         # missing check digit
        "a123456(3)",      # lowercase prefix
        "ABC123456(3)",    # three-letter prefix
        "A1234567(3)",     # seven digits
        "A123456(B)",      # check character outside 0-9/A
        "()",              # nothing left once parentheses are removed
        "A1(23)456",       # still missing the check digit without parentheses
        "A123456[3]",
        "A123456(3)\n",
        " A123456(3)",
        "A 123456(3)",
        "１23456(3)",
    ]
