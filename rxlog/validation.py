"""
Business rules for prescriptions and remarks.

Every check is a pure predicate; the two ``validate_*`` passes run all of
them and return the failures in a fixed order instead of stopping at the
first one.
"""

from decimal import Decimal
from numbers import Real
from typing import List, Optional

from rxlog.config import (
    ADDRESS_MIN_LENGTH,
    AXIS_RANGE,
    CYLINDER_RANGE,
    MAX_REMARK_CATEGORIES,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    OPTOMETRIST_MAX_LENGTH,
    OPTOMETRIST_MIN_LENGTH,
    REMARK_CATEGORIES,
    REMARK_MAX_WORDS,
    REMARK_MIN_WORDS,
    SPHERE_RANGE,
)
from rxlog.models import Prescription, Violation


MSG_FIRST_NAME = "Invalid first name. Must be 4-15 characters and start with an uppercase letter."
MSG_LAST_NAME = "Invalid last name. Must be 4-15 characters and start with an uppercase letter."
MSG_ADDRESS = "Invalid address. Must be at least 20 characters long."
MSG_SPHERE = "Invalid sphere value. Must be between -20.00 and 20.00."
MSG_CYLINDER = "Invalid cylinder value. Must be between -4.00 and 4.00."
MSG_AXIS = "Invalid axis value. Must be between 0 and 180."
MSG_OPTOMETRIST = "Invalid optometrist name. Length must be 8-25 characters."

MSG_REMARK_TEXT = "Invalid remark. Must be 6-20 words and start with an uppercase letter."
MSG_CATEGORY = "Invalid category. Must be 'Client' or 'Optometrist'."
MSG_DUPLICATE_CATEGORY = "Duplicate category. Each category can only be used once."
MSG_CATEGORY_LIMIT = "Maximum number of remark categories reached. You can only add up to 2."


# ── Predicates ───────────────────────────────────────────────────────

def _is_single_line(text: str) -> bool:
    # Each accepted record must stay one physical line in its log.
    return "\n" not in text and "\r" not in text


def is_valid_name(name: Optional[str]) -> bool:
    return (
        isinstance(name, str)
        and NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH
        and name[0].isupper()
        and _is_single_line(name)
    )


def is_valid_address(address: Optional[str]) -> bool:
    return (
        isinstance(address, str)
        and len(address) >= ADDRESS_MIN_LENGTH
        and _is_single_line(address)
    )


def _in_range(value, bounds) -> bool:
    # NaN and non-numbers (including None) never satisfy a range.
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    if value != value:
        return False
    low, high = bounds
    return low <= value <= high


def is_valid_sphere(sphere) -> bool:
    return _in_range(sphere, SPHERE_RANGE)


def is_valid_cylinder(cylinder) -> bool:
    return _in_range(cylinder, CYLINDER_RANGE)


def is_valid_axis(axis) -> bool:
    return _in_range(axis, AXIS_RANGE)


def is_valid_optometrist(optometrist: Optional[str]) -> bool:
    return (
        isinstance(optometrist, str)
        and OPTOMETRIST_MIN_LENGTH <= len(optometrist) <= OPTOMETRIST_MAX_LENGTH
        and _is_single_line(optometrist)
    )


def is_valid_remark_text(remark: Optional[str]) -> bool:
    """6-20 whitespace-separated words on one line, first character uppercase."""
    if not isinstance(remark, str) or not _is_single_line(remark):
        return False
    text = remark.strip()
    if not text:
        return False
    words = text.split()
    return REMARK_MIN_WORDS <= len(words) <= REMARK_MAX_WORDS and text[0].isupper()


def canonical_category(category: Optional[str]) -> Optional[str]:
    """Return the canonical spelling of *category*, or None if it is unknown."""
    if not isinstance(category, str):
        return None
    for known in REMARK_CATEGORIES:
        if known.lower() == category.lower():
            return known
    return None


def is_valid_category(category: Optional[str]) -> bool:
    return canonical_category(category) is not None


# ── Passes ───────────────────────────────────────────────────────────

def validate_prescription(record: Prescription) -> List[Violation]:
    """Return every rule the record currently breaks, in field order."""
    checks = [
        ("first_name", is_valid_name(record.first_name), MSG_FIRST_NAME),
        ("last_name", is_valid_name(record.last_name), MSG_LAST_NAME),
        ("address", is_valid_address(record.address), MSG_ADDRESS),
        ("sphere", is_valid_sphere(record.sphere), MSG_SPHERE),
        ("cylinder", is_valid_cylinder(record.cylinder), MSG_CYLINDER),
        ("axis", is_valid_axis(record.axis), MSG_AXIS),
        ("optometrist", is_valid_optometrist(record.optometrist), MSG_OPTOMETRIST),
    ]
    return [Violation(rule, message) for rule, ok, message in checks if not ok]


def validate_remark(record: Prescription, remark: Optional[str],
                    category: Optional[str]) -> List[Violation]:
    """Check one remark submission against the text rules and the record's
    remark history. The record is not modified."""
    violations = []
    accepted = record.accepted_remark_categories

    # Word count and capitalisation share a single message.
    if not is_valid_remark_text(remark):
        violations.append(Violation("remark_text", MSG_REMARK_TEXT))

    canonical = canonical_category(category)
    if canonical is None:
        violations.append(Violation("category", MSG_CATEGORY))
    elif canonical in accepted:
        violations.append(Violation("duplicate_category", MSG_DUPLICATE_CATEGORY))

    if len(accepted) >= MAX_REMARK_CATEGORIES:
        violations.append(Violation("category_limit", MSG_CATEGORY_LIMIT))

    return violations
