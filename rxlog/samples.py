"""
Fixed sample submissions with their expected outcome.

Each remark case runs against a fresh record, so only the text and
category rules decide the outcome.
"""

from dataclasses import dataclass
from typing import List, Tuple

from rxlog.dates import InputError, parse_examination_date
from rxlog.models import Prescription


# (id, first, last, address, sphere, cylinder, axis, date, optometrist, expected)
SAMPLE_PRESCRIPTIONS: List[Tuple] = [
    (1, "Alice", "Peter", "1/60 Roberts St, VI, 3012", 2.50, -1.75, 90.0,
     "23/10/2024", "Dr. Williams", True),
    (2, "Joe", "Zared", "13/201 Auburn Rd, VIC, 3122", 0.0, 0.0, 0.0,
     "11/12/2024", "Dr. Alan", False),            # first name too short
    (3, "Bob", "Smith", "123 Example St, VIC, 3000", -21.0, 1.5, 60.0,
     "30/10/2024", "Dr. John", False),            # short name, sphere
    (4, "Charlie", "Brown", "456 Sample Ave, VIC, 3001", 19.0, 5.0, 180.0,
     "05/11/2024", "Dr. Jane", False),            # cylinder
    (5, "David", "Williams", "789 Test Rd, VIC, 3002", 5.5, -1.0, 90.0,
     "15/11/2024", "Dr. Smith", True),
    (6, "Eve", "Davis", "999 Sample Blvd, VIC, 3003", 10.0, 0.0, 181.0,
     "20/11/2024", "Dr. Richards", False),        # short name, axis
]

# (id, remark, category, expected)
SAMPLE_REMARKS: List[Tuple] = [
    (1, "The doctor was friendly", "Optometrist", False),   # four words
    (2, "the doctor was friendly", "Client", False),        # lowercase, four words
    (3, "This is a great service", "Client", False),        # five words
    (4, "Excellent service but a bit slow", "Optometrist", True),
    (5, "Friendly staff", "Optometrist", False),
    (6, "Amazing experience", "Doctor", False),             # unknown category
]


@dataclass
class SampleOutcome:
    kind: str
    case_id: int
    expected: bool
    actual: bool
    messages: List[str]

    @property
    def matched(self) -> bool:
        return self.expected == self.actual


def run_samples(desk) -> List[SampleOutcome]:
    """Submit every sample through *desk* and report expected vs. actual."""
    outcomes = []

    for (case_id, first, last, address, sphere, cylinder, axis,
         date_text, optometrist, expected) in SAMPLE_PRESCRIPTIONS:
        record = Prescription()
        try:
            exam_date = parse_examination_date(date_text)
        except InputError as e:
            outcomes.append(SampleOutcome("prescription", case_id, expected, False, [str(e)]))
            continue
        record.set_details(case_id, first, last, address,
                           sphere, cylinder, axis, exam_date, optometrist)
        result = desk.submit_prescription(record)
        messages = result.messages + ([result.error] if result.error else [])
        outcomes.append(SampleOutcome("prescription", case_id, expected, result.success, messages))

    for case_id, remark, category, expected in SAMPLE_REMARKS:
        result = desk.submit_remark(Prescription(), remark, category)
        messages = result.messages + ([result.error] if result.error else [])
        outcomes.append(SampleOutcome("remark", case_id, expected, result.success, messages))

    return outcomes
