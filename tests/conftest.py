"""
Shared fixtures: sample records and isolated logs.
"""

from datetime import date

import pytest

from rxlog.models import Prescription
from rxlog.prescription import PrescriptionDesk
from rxlog.writer import AppendOnlyLog, MemoryLog


def make_record(**overrides) -> Prescription:
    """A record that passes every prescription rule unless overridden."""
    fields = dict(
        id=1,
        first_name="Alice",
        last_name="Peter",
        address="1/60 Roberts St, VI, 3012",
        sphere=2.50,
        cylinder=-1.75,
        axis=90.0,
        examination_date=date(2024, 10, 23),
        optometrist="Dr. Williams",
    )
    fields.update(overrides)
    record = Prescription()
    record.set_details(**fields)
    return record


@pytest.fixture
def record():
    return make_record()


@pytest.fixture
def file_desk(tmp_path):
    """Desk writing to real files under a temp directory."""
    return PrescriptionDesk(AppendOnlyLog(tmp_path / "presc.txt"),
                            AppendOnlyLog(tmp_path / "remark.txt"))


@pytest.fixture
def memory_desk():
    return PrescriptionDesk(MemoryLog("presc"), MemoryLog("remark"))
