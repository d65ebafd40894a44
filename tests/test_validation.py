"""
Unit tests for the prescription and remark rules.
"""

import math
from decimal import Decimal

import pytest

from conftest import make_record
from rxlog.models import Prescription
from rxlog.validation import (
    MSG_CATEGORY,
    MSG_REMARK_TEXT,
    MSG_SPHERE,
    canonical_category,
    is_valid_address,
    is_valid_axis,
    is_valid_category,
    is_valid_cylinder,
    is_valid_name,
    is_valid_optometrist,
    is_valid_remark_text,
    is_valid_sphere,
    validate_prescription,
    validate_remark,
)


# ── Tests: predicates ────────────────────────────────────────────────

def test_is_valid_name_bounds_and_case():
    assert is_valid_name("Alice")
    assert is_valid_name("Abcd")
    assert is_valid_name("A" * 15)
    assert not is_valid_name("Joe")
    assert not is_valid_name("A" * 16)
    assert not is_valid_name("alice")
    assert not is_valid_name("")
    assert not is_valid_name(None)


def test_is_valid_address_min_length():
    assert is_valid_address("x" * 20)
    assert not is_valid_address("x" * 19)
    assert not is_valid_address(None)


def test_measurement_ranges_are_inclusive():
    assert is_valid_sphere(-20.0) and is_valid_sphere(20.0)
    assert not is_valid_sphere(-20.01) and not is_valid_sphere(20.01)
    assert is_valid_cylinder(-4.0) and is_valid_cylinder(4.0)
    assert not is_valid_cylinder(4.5)
    assert is_valid_axis(0) and is_valid_axis(180)
    assert not is_valid_axis(-1) and not is_valid_axis(181)


def test_measurement_rejects_missing_and_nan():
    assert not is_valid_sphere(None)
    assert not is_valid_cylinder(math.nan)
    assert not is_valid_axis("90")


def test_is_valid_optometrist_length():
    assert is_valid_optometrist("Dr. Alan")
    assert is_valid_optometrist("D" * 25)
    assert not is_valid_optometrist("Dr. Al")
    assert not is_valid_optometrist("D" * 26)
    assert not is_valid_optometrist(None)


def test_is_valid_remark_text():
    assert is_valid_remark_text("Excellent service but a bit slow")
    assert is_valid_remark_text("  Excellent service but a bit slow  ")
    assert not is_valid_remark_text("The doctor was friendly")
    assert not is_valid_remark_text("excellent service but a bit slow")
    assert not is_valid_remark_text(" ".join(["Word"] * 21))
    assert is_valid_remark_text(" ".join(["Word"] * 20))
    assert not is_valid_remark_text("")
    assert not is_valid_remark_text(None)


def test_category_is_case_insensitive_and_canonicalised():
    assert is_valid_category("client")
    assert is_valid_category("OPTOMETRIST")
    assert not is_valid_category("Doctor")
    assert not is_valid_category(None)
    assert canonical_category("optometrist") == "Optometrist"
    assert canonical_category("Doctor") is None


# ── Tests: validate_prescription ─────────────────────────────────────

def test_valid_record_has_no_violations(record):
    assert validate_prescription(record) == []


@pytest.mark.parametrize("overrides, rule", [
    ({"first_name": "Joe"}, "first_name"),
    ({"last_name": "smith"}, "last_name"),
    ({"address": "Short St"}, "address"),
    ({"sphere": -21.0}, "sphere"),
    ({"cylinder": 5.0}, "cylinder"),
    ({"axis": 181.0}, "axis"),
    ({"optometrist": "Dr. Al"}, "optometrist"),
])
def test_single_broken_rule_gives_single_violation(overrides, rule):
    violations = validate_prescription(make_record(**overrides))
    assert [v.rule for v in violations] == [rule]


def test_sphere_violation_message():
    violations = validate_prescription(make_record(sphere=-21.0))
    assert violations[0].message == MSG_SPHERE


def test_all_violations_reported_in_field_order():
    record = make_record(first_name="bob", last_name=None, address="x",
                         sphere=30.0, cylinder=-5.0, axis=200.0, optometrist="Dr")
    rules = [v.rule for v in validate_prescription(record)]
    assert rules == ["first_name", "last_name", "address", "sphere",
                     "cylinder", "axis", "optometrist"]


def test_validate_prescription_is_idempotent():
    record = make_record(first_name="Eve", axis=181.0)
    assert validate_prescription(record) == validate_prescription(record)


# ── Tests: validate_remark ───────────────────────────────────────────

def test_valid_remark_on_fresh_record():
    assert validate_remark(Prescription(), "Excellent service but a bit slow", "Client") == []


def test_short_and_lowercase_share_one_message():
    violations = validate_remark(Prescription(), "the doctor was friendly", "Client")
    assert [v.message for v in violations] == [MSG_REMARK_TEXT]


def test_unknown_category_rejected():
    violations = validate_remark(Prescription(), "Amazing experience with the whole team", "Doctor")
    assert [v.rule for v in violations] == ["category"]
    assert violations[0].message == MSG_CATEGORY


def test_duplicate_category_ignores_case():
    record = Prescription()
    record.accepted_remark_categories.add("Client")
    violations = validate_remark(record, "Excellent service but a bit slow", "client")
    assert [v.rule for v in violations] == ["duplicate_category"]


def test_limit_reached_fails_regardless_of_input():
    record = Prescription()
    record.accepted_remark_categories.update({"Client", "Optometrist"})
    violations = validate_remark(record, "bad", "Doctor")
    assert [v.rule for v in violations] == ["remark_text", "category", "category_limit"]


def test_validate_remark_does_not_touch_state():
    record = Prescription()
    validate_remark(record, "Excellent service but a bit slow", "Client")
    assert record.accepted_remark_categories == set()


# ── Tests: single-line fields and decimal measurements ───────────────

def test_line_breaks_fail_text_predicates():
    assert not is_valid_name("Ali\nce")
    assert not is_valid_address("1/60 Roberts St\nVIC 3012 AU")
    assert not is_valid_optometrist("Dr.\rWilliams")
    assert not is_valid_remark_text("The doctor was\nvery friendly today")
    assert not is_valid_remark_text("The doctor was very friendly today\n")
    assert is_valid_remark_text("The doctor was\tvery friendly today")


def test_decimal_measurements_accepted():
    assert validate_prescription(make_record(sphere=Decimal("2.50"),
                                             cylinder=Decimal("-4.00"),
                                             axis=Decimal("180"))) == []
    assert not is_valid_sphere(Decimal("20.01"))
    assert not is_valid_axis(Decimal("NaN"))
