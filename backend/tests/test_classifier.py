"""Tests for the keyword classification gate."""

import pytest

from order_intake.order_extractor.classifier import matched_keywords, should_handle


class TestShouldHandle:
    def test_shipment_confirmation(self):
        assert should_handle(["Shipment Confirmation", "Consignee: Acme"]) is True

    def test_unrelated_text(self):
        assert should_handle(["Random unrelated text"]) is False

    @pytest.mark.parametrize("word", ["ORDER", "Loading", "consignee", "SHIPMENT"])
    def test_each_keyword_is_enough(self, word):
        assert should_handle([f"Some {word} text"]) is True

    def test_substring_match(self):
        assert should_handle(["Transportorder 2024"]) is True

    def test_empty_document(self):
        assert should_handle([]) is False

    def test_keyword_split_across_lines_does_not_match(self):
        assert should_handle(["ord", "er"]) is False


class TestMatchedKeywords:
    def test_reports_hits_in_table_order(self):
        hits = matched_keywords(["Consignee: Acme", "Transport order"])
        assert hits == ["order", "consignee"]

    def test_custom_keywords(self):
        assert matched_keywords(["Frachtbrief"], ["frachtbrief"]) == ["frachtbrief"]
