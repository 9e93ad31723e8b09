"""Presidio recognizers for HKID numbers."""

from hkid_ops.recognizers.hk_id_card import HKIdCardRecognizer

__all__ = ["HKIdCardRecognizer"]
