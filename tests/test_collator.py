"""
Unit tests for result ordering.
"""

import itertools
import random

from invoice_batch.extraction import ExtractedRecord
from invoice_batch.pipeline.collator import (
    ResultCollator,
    compare_invoice_ids,
    invoice_sequence,
    sort_records,
)


def records_for(*invoice_ids):
    return [ExtractedRecord(invoice_id=invoice_id) for invoice_id in invoice_ids]


def ids(records):
    return [r.invoice_id for r in records]


class TestInvoiceSequence:
    """Test cases for numeric suffix parsing."""

    def test_numeric_suffix(self):
        assert invoice_sequence("FT 2023/12345") == 12345

    def test_suffix_whitespace_is_ignored(self):
        assert invoice_sequence("FT 2023/ 42 ") == 42

    def test_signed_suffix(self):
        assert invoice_sequence("FT 2023/-3") == -3

    def test_only_second_segment_is_used(self):
        assert invoice_sequence("A/7/9") == 7

    def test_no_separator(self):
        assert invoice_sequence("X") is None

    def test_non_numeric_suffix(self):
        assert invoice_sequence("Y/abc") is None

    def test_empty_suffix(self):
        assert invoice_sequence("FT 2023/") is None

    def test_empty_invoice_id(self):
        assert invoice_sequence("") is None


class TestCompareInvoiceIds:
    """Test cases for the pairwise comparison."""

    def test_numeric_comparison(self):
        assert compare_invoice_ids("FT 2023/1001", "FT 2023/12345") < 0
        assert compare_invoice_ids("FT 2023/12345", "FT 2023/1001") > 0

    def test_numeric_comparison_ignores_prefix(self):
        assert compare_invoice_ids("ZZ 2024/5", "AA 2020/6") < 0

    def test_equal_numbers(self):
        assert compare_invoice_ids("A/10", "B/10") == 0

    def test_string_fallback_without_separator(self):
        assert compare_invoice_ids("X", "Y/abc") < 0
        assert compare_invoice_ids("Y/abc", "X") > 0

    def test_string_fallback_when_one_side_parses(self):
        # "FT 2023/9" parses, "FT 2023/A1" does not: plain string order
        assert compare_invoice_ids("FT 2023/9", "FT 2023/A1") < 0
        assert compare_invoice_ids("FT 2023/A1", "FT 2023/9") > 0

    def test_empty_sorts_first_in_string_fallback(self):
        assert compare_invoice_ids("", "FT 2023/1") < 0


class TestSortRecords:
    """Test cases for sort_records and ResultCollator."""

    def test_numeric_order_regardless_of_input_order(self):
        assert ids(sort_records(records_for("FT 2023/12345", "FT 2023/1001"))) == [
            "FT 2023/1001", "FT 2023/12345"
        ]
        assert ids(sort_records(records_for("FT 2023/1001", "FT 2023/12345"))) == [
            "FT 2023/1001", "FT 2023/12345"
        ]

    def test_numeric_not_lexicographic(self):
        ordered = sort_records(records_for("FT 2023/100", "FT 2023/20", "FT 2023/3"))
        assert ids(ordered) == ["FT 2023/3", "FT 2023/20", "FT 2023/100"]

    def test_permutations_give_same_order(self):
        values = ["FT 2023/12345", "FT 2023/1001", "FT 2022/7", "FT 2024/250", "FT 2023/99"]
        expected = ids(sort_records(records_for(*values)))

        for permutation in itertools.permutations(values):
            assert ids(sort_records(records_for(*permutation))) == expected

    def test_permutations_of_unsequenced_ids(self):
        values = ["X", "Y/abc", "A", "", "B/x"]
        expected = sorted(values)

        for permutation in itertools.permutations(values):
            assert ids(sort_records(records_for(*permutation))) == expected

    def test_sort_does_not_modify_input(self):
        records = records_for("FT 2023/2", "FT 2023/1")
        sort_records(records)
        assert ids(records) == ["FT 2023/2", "FT 2023/1"]

    def test_collate_large_shuffled_batch(self):
        values = [f"FT 2023/{n}" for n in range(1, 501)]
        shuffled = list(values)
        random.Random(7).shuffle(shuffled)

        ordered = ResultCollator().collate(records_for(*shuffled))
        assert ids(ordered) == values

    def test_collate_empty(self):
        assert ResultCollator().collate([]) == []

    def test_collate_generator_input(self, caplog):
        records = (r for r in records_for("FT 2023/2", "FT 2023/x", "FT 2023/1"))

        with caplog.at_level("WARNING", logger="invoice_batch"):
            ordered = ResultCollator().collate(records)

        assert ids(ordered) == ["FT 2023/1", "FT 2023/2", "FT 2023/x"]
        assert "1 of 3 records have no numeric invoice suffix" in caplog.text
