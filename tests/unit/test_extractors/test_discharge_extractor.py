"""Tests for DischargeExtractor."""

import logging

from discharge.core.models import DischargeRecord
from discharge.extractors.discharge_extractor import DischargeExtractor, count_characters
from discharge.extractors.rules import LineRule


def test_extractor_name_in_summary_log(sample_lines, caplog):
    """Test the scan summary is logged under the extractor name."""
    extractor = DischargeExtractor()

    with caplog.at_level(logging.INFO):
        extractor.extract(sample_lines)

    assert extractor.name == "discharge"
    assert f"[discharge] Scanned {len(sample_lines)} lines, extracted 3 records" in caplog.text


def test_extract_single_item():
    """Test the fully populated single item export."""
    lines = [
        "ABC",
        "Smith, John",
        "Cats and Dogs / A Tale",
        "copy: 2 of 3",
        "item ID: ::12345 extra",
        "type: BOOK more",
        "location: KIDS-A1 zone",
        "Date of discharge: 2024-01-05",
    ]

    records = DischargeExtractor().extract(lines)

    assert records == [
        DischargeRecord(
            header="ABC",
            author="Smith, John",
            description="Cats and Dogs / A Tale",
            copy="2",
            item_id="12345",
            item_type="BOOK",
            location="KIDS",
            date=" 2024-01-05",
        )
    ]


def test_record_count_matches_terminator_lines(sample_lines):
    """Test one record per terminator line."""
    records = DischargeExtractor().extract(sample_lines)

    terminators = [line for line in sample_lines if "Date of discharge:" in line]
    assert len(records) == len(terminators) == 3


def test_records_in_input_order(sample_lines):
    """Test records come out in emission order."""
    records = DischargeExtractor().extract(sample_lines)

    assert [record.date for record in records] == [
        " 2024-01-05",
        " 2024-01-06",
        " 2024-01-07",
    ]


def test_fields_carry_over_between_records(sample_lines):
    """Test slots not overwritten keep the previous item's value."""
    first, second, _third = DischargeExtractor().extract(sample_lines)

    assert second.location == first.location == "KIDS"
    assert second.header == "ABC"
    assert second.author == "Smith, John"
    assert second.item_type == "BOOK"
    assert second.copy == "1"
    assert second.item_id == "67890"


def test_new_field_lines_overwrite_carried_values(sample_lines):
    """Test later field lines replace earlier slot values."""
    records = DischargeExtractor().extract(sample_lines)
    third = records[2]

    assert third.header == "GN FANTASY"
    assert third.author == "Ito, Junji"
    assert third.description == "Uzumaki / Junji Ito"
    assert third.item_type == "COMIC"
    assert third.location == "ADULT"


def test_terminator_without_fields_yields_empty_record():
    """Test a terminator before any field line."""
    records = DischargeExtractor().extract(["Date of discharge: 2024-02-01"])

    assert records == [DischargeRecord(date=" 2024-02-01")]


def test_empty_input_yields_no_records():
    """Test empty input and input without terminators."""
    extractor = DischargeExtractor()

    assert extractor.extract([]) == []
    assert extractor.extract(["ABC", "Smith, John", "location: MAIN"]) == []


def test_extract_is_idempotent(sample_lines):
    """Test repeated runs give identical output."""
    extractor = DischargeExtractor()

    first = extractor.extract(sample_lines)
    second = extractor.extract(sample_lines)

    assert first == second


def test_state_does_not_leak_between_runs():
    """Test slots start empty on every call."""
    extractor = DischargeExtractor()
    extractor.extract(["ABC", "location: MAIN", "Date of discharge: x"])

    records = extractor.extract(["Date of discharge: y"])

    assert records[0].header is None
    assert records[0].location is None


def test_multiple_rules_fire_on_one_line():
    """Test a line matching several rules updates every matching slot."""
    lines = ["copy: 3 type: DVD", "Date of discharge: 2024-03-01"]

    records = DischargeExtractor().extract(lines)

    assert records[0].copy == "3"
    assert records[0].item_type == "DVD"


def test_field_rules_apply_to_terminator_line():
    """Test field rules run on the terminator line before it is emitted."""
    lines = ["location: MAIN Date of discharge: 2024-03-02"]

    records = DischargeExtractor().extract(lines)

    assert records[0].location == "MAIN Date of discharge: 2024"
    assert records[0].date == " 2024-03-02"


def test_author_bound_is_configurable():
    """Test author_max_length changes which comma lines count as authors."""
    lines = ["Longer, Author Name Here", "Date of discharge: d"]

    default = DischargeExtractor().extract(lines)
    strict = DischargeExtractor(author_max_length=10).extract(lines)

    assert default[0].author == "Longer, Author Name Here"
    assert strict[0].author is None


def test_custom_rules():
    """Test a custom rule table replaces the default one."""
    def set_location(draft, line):
        draft.location = line

    rules = [LineRule("shelf", lambda line: line.startswith("SHELF"), set_location)]

    records = DischargeExtractor(rules=rules).extract(
        ["ABC", "SHELF 9", "Date of discharge: d"]
    )

    assert records[0].location == "SHELF 9"
    assert records[0].header is None


def test_count_characters():
    """Test per-line length diagnostics."""
    diagnostics = count_characters(["ABC", "", "  x  "])

    assert [(d.line_no, d.length, d.content) for d in diagnostics] == [
        (1, 3, "ABC"),
        (2, 0, ""),
        (3, 5, "  x  "),
    ]
