"""Unit tests for turning CSV fields into catalog rows."""

import json
import logging

import pytest

from catalog.ingest.normalizer import (
    normalize_fields,
    parse_credits,
    parse_json_field,
    parse_semester,
    read_catalog_rows,
    split_departments,
)
from catalog.ingest.parser import split_fields

from conftest import CSV_HEADER, csv_line


@pytest.mark.parametrize(
    "label, expected",
    [("1st", 1), ("2nd", 2), ("3rd", 3), ("10th", 10), (" 4th ", 4), ("abc", 0), ("", 0), ("Sem 5", 0)],
)
def test_parse_semester(label: str, expected: int) -> None:
    assert parse_semester(label) == expected


@pytest.mark.parametrize("value, expected", [("4", 4), ("3 credits", 3), ("", 0), ("n/a", 0), ("-2", 0)])
def test_parse_credits(value: str, expected: int) -> None:
    assert parse_credits(value) == expected


def test_split_departments_trims_and_dedupes() -> None:
    assert split_departments(" CSE, IT ,, CSE,ECE ") == ("CSE", "IT", "ECE")
    assert split_departments("") == ()


def test_parse_json_field_unwraps_quoting() -> None:
    assert parse_json_field('"{""units"": [1, 2]}"') == {"units": [1, 2]}
    assert parse_json_field('[{"name": "Lab 1"}]') == [{"name": "Lab 1"}]


def test_parse_json_field_blank_is_none() -> None:
    assert parse_json_field("") is None
    assert parse_json_field("   ") is None


def test_parse_json_field_invalid_logs_and_returns_none(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="catalog.ingest.normalizer"):
        assert parse_json_field('"{not json"') is None
    assert "Failed to parse JSON field" in caplog.text


def test_normalize_full_row() -> None:
    syllabus = {"units": [{"title": "Arrays", "topics": ["1-D", "2-D"]}]}
    line = csv_line(
        "3rd",
        "cs301",
        "Data Structures",
        "CSE, IT",
        theory_code="CIC-209",
        lab_code="CIC-253",
        theory_credits="4",
        lab_credits="1",
        syllabus=json.dumps(syllabus),
        extra=["12", "3", "2", "5", "", "a;b", "c", "", "d"],
    )
    row = normalize_fields(split_fields(line))

    assert row is not None
    assert row.semester == 3
    assert row.semester_label == "3rd"
    assert row.slug == "cs301"
    assert row.name == "Data Structures"
    assert row.subject_code == "CIC-209"
    assert row.lab_code == "CIC-253"
    assert row.theory_credits == 4
    assert row.practical_credits == 1
    assert row.departments == ("CSE", "IT")
    assert row.syllabus == syllabus
    assert row.practical_topics is None
    assert row.notes_count == "12"
    assert row.notes_file_ids == "a;b"
    assert row.practicals_file_ids == "d"


def test_code_falls_back_to_slug_and_zero_lab_credits_is_none() -> None:
    row = normalize_fields(split_fields(csv_line("1st", "ma101", "Maths I", "CSE", lab_credits="0")))
    assert row is not None
    assert row.subject_code == "ma101"
    assert row.practical_credits is None


def test_unparseable_semester_is_kept_for_the_reconciler_to_reject() -> None:
    row = normalize_fields(split_fields(csv_line("elective", "hs101", "Ethics", "CSE")))
    assert row is not None
    assert row.semester == 0


def test_rows_without_slug_or_name_are_skipped() -> None:
    assert normalize_fields(split_fields(csv_line("1st", "", "Intro", "CSE"))) is None
    assert normalize_fields(split_fields(csv_line("1st", "cs101", "  ", "CSE"))) is None


def test_short_rows_are_skipped_and_missing_tail_defaults() -> None:
    assert normalize_fields(["1st", "cs101", "Intro"]) is None
    row = normalize_fields(["1st", "cs101", "Intro", "", "", "3", "", "CSE", ""])
    assert row is not None
    assert row.departments == ("CSE",)
    assert row.practicals_file_ids == ""


def test_read_catalog_rows_with_multi_line_json() -> None:
    syllabus = {"units": [{"title": "Sets", "hours": 8}, {"title": "Relations", "hours": 6}]}
    experiments = [{"no": 1, "aim": "Implement \"hello, world\""}]
    text = "\n".join(
        [
            CSV_HEADER,
            csv_line(
                "1st",
                "cs101",
                "Discrete Maths",
                "CSE, IT",
                syllabus=json.dumps(syllabus, indent=2),
                lab_experiments=json.dumps(experiments, indent=2),
            ),
            csv_line("2nd", "cs102", "Programming", "CSE"),
            "",
        ]
    )
    rows = list(read_catalog_rows(text.split("\n")))

    assert [r.slug for r in rows] == ["cs101", "cs102"]
    assert rows[0].syllabus == syllabus
    assert rows[0].practical_topics == experiments
    assert rows[0].departments == ("CSE", "IT")
    assert rows[1].semester == 2


def test_unexpected_header_is_logged_but_rows_are_read(caplog) -> None:
    lines = ["sem,slug,name", csv_line("1st", "cs101", "Intro", "CSE")]
    with caplog.at_level(logging.WARNING, logger="catalog.ingest.normalizer"):
        rows = list(read_catalog_rows(lines))
    assert [r.slug for r in rows] == ["cs101"]
    assert "Unexpected CSV header" in caplog.text
