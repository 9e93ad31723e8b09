"""Unit tests for the HKID recognizer."""

import pytest

from hkid_ops.recognizers.hk_id_card import HKIdCardRecognizer


class TestHKIdCardRecognizer:
    """Tests for HK ID card recognizer."""

    @pytest.fixture
    def recognizer(self):
        """Create recognizer instance."""
        return HKIdCardRecognizer()

    def test_supported_entity(self, recognizer):
        """Test the supported entity name."""
        assert recognizer.supported_entities == ["HK_ID_CARD"]
        assert recognizer.supported_language == "en"

    def test_valid_hkid(self, recognizer):
        """Test validating a correct HKID."""
        assert recognizer.validate_result("A123456(3)") is True
        assert recognizer.validate_result("A1234563") is True
        assert recognizer.validate_result("WX123456(9)") is True

    def test_invalid_checksum(self, recognizer):
        """Test rejecting a wrong check digit."""
        assert recognizer.validate_result("A123456(9)") is False

    def test_invalid_format(self, recognizer):
        """Test rejecting a malformed match."""
        assert recognizer.validate_result("A12345") is False
        assert recognizer.validate_result("a123456(3)") is False

    def test_must_be_known(self):
        """Test the must_be_known option."""
        recognizer = HKIdCardRecognizer(must_be_known=True)
        assert recognizer.validate_result("XX123456(0)") is False
        assert recognizer.validate_result("A123456(3)") is True

    def test_analyze_finds_valid_hkid(self, recognizer):
        """Test finding an HKID in text."""
        text = "My HKID is A123456(3), please keep it safe."
        results = recognizer.analyze(text, entities=["HK_ID_CARD"])

        assert len(results) == 1
        assert results[0].entity_type == "HK_ID_CARD"
        assert text[results[0].start:results[0].end] == "A123456(3)"
        assert results[0].score == 1.0

    def test_analyze_plain_format(self, recognizer):
        """Test finding an HKID without parentheses."""
        text = "香港身份證號碼 AB1234569"
        results = recognizer.analyze(text, entities=["HK_ID_CARD"])

        assert len(results) == 1
        assert text[results[0].start:results[0].end] == "AB1234569"

    def test_analyze_drops_invalid_checksum(self, recognizer):
        """Test dropping matches with a wrong check digit."""
        results = recognizer.analyze("HKID A123456(9)", entities=["HK_ID_CARD"])
        assert results == []

    def test_analyze_ignores_embedded_numbers(self, recognizer):
        """Test ignoring numbers embedded in longer tokens."""
        results = recognizer.analyze("order XA1234563B7", entities=["HK_ID_CARD"])
        assert results == []

    def test_extra_context(self):
        """Test adding extra context words."""
        recognizer = HKIdCardRecognizer(context=["證件"])
        assert "證件" in recognizer.context
        assert "HKID" in recognizer.context
