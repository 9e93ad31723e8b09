"""
Hong Kong Identity Card (HKID) Recognizer

Recognizes HKID numbers in free text with check digit validation.
Format: P[P]DDDDDD(C) (1-2 letter prefix + 6 digits + check character 0-9/A)
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from hkid_ops.core.validator import is_valid_hkid


class HKIdCardRecognizer(PatternRecognizer):
    """Recognizer for Hong Kong Identity Card numbers.

    Supports:
    - One or two letter prefixes
    - Check digit with or without parentheses
    - Weighted mod-11 check digit validation

    Example:
        >>> recognizer = HKIdCardRecognizer()
        >>> results = recognizer.analyze("HKID: A123456(3)", entities=["HK_ID_CARD"])
    """

    PATTERNS = [
        Pattern(
            name="hk_id_card_parenthesized",
            regex=r"(?<![A-Za-z0-9])[A-Z]{1,2}[0-9]{6}\([0-9A]\)",
            score=0.6,
        ),
        Pattern(
            name="hk_id_card_plain",
            regex=r"(?<![A-Za-z0-9])[A-Z]{1,2}[0-9]{6}[0-9A](?![A-Za-z0-9])",
            score=0.4,
        ),
    ]

    CONTEXT = [
        "HKID",
        "hkid",
        "identity card",
        "ID card",
        "香港身份证",
        "香港身份證",
        "身份证",
        "身份證",
        "身份证号码",
        "身份證號碼",
    ]

    def __init__(
        self,
        supported_language: str = "en",
        context: Optional[list[str]] = None,
        must_be_known: bool = False,
    ) -> None:
        """Initialize the recognizer.

        Args:
            supported_language: Language code (default: en).
            context: Additional context words.
            must_be_known: Only accept HKIDs with a known prefix.
        """
        context_words = list(self.CONTEXT) + (context or [])
        self.must_be_known = must_be_known

        super().__init__(
            supported_entity="HK_ID_CARD",
            patterns=self.PATTERNS,
            context=context_words,
            supported_language=supported_language,
        )

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """Validate the HKID check digit.

        Args:
            pattern_text: The matched HKID text.

        Returns:
            True if valid, False otherwise.
        """
        return is_valid_hkid(pattern_text, must_be_known=self.must_be_known)
