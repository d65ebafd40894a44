"""
Domain dataclasses used across the application.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Set


@dataclass
class Prescription:
    """One prescription entry: client, lens, exam and practitioner data.

    Fields are filled in while the record is assembled and may be set again
    before a later submission; only the current values are validated and
    written. ``accepted_remark_categories`` only ever grows, and only through
    a successful remark submission.
    """
    id: int = 0
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    sphere: float = 0.0
    cylinder: float = 0.0
    axis: float = 0.0
    examination_date: Optional[date] = None
    optometrist: Optional[str] = None
    accepted_remark_categories: Set[str] = field(default_factory=set)

    def set_details(self, id, first_name, last_name, address,
                    sphere, cylinder, axis, examination_date, optometrist):
        """Set every data field at once. Remark state is left untouched."""
        self.id = id
        self.first_name = first_name
        self.last_name = last_name
        self.address = address
        self.sphere = sphere
        self.cylinder = cylinder
        self.axis = axis
        self.examination_date = examination_date
        self.optometrist = optometrist

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "address": self.address,
            "sphere": self.sphere,
            "cylinder": self.cylinder,
            "axis": self.axis,
            "examination_date": (
                self.examination_date.isoformat() if self.examination_date else None
            ),
            "optometrist": self.optometrist,
            "accepted_remark_categories": sorted(self.accepted_remark_categories),
        }


@dataclass(frozen=True)
class Violation:
    """One failed validation rule."""
    rule: str      # stable key, e.g. "sphere" or "duplicate_category"
    message: str


@dataclass
class SubmissionResult:
    """Outcome of a prescription or remark submission."""
    success: bool
    violations: List[Violation] = field(default_factory=list)
    error: Optional[str] = None   # input-shape or write failure
    line: Optional[str] = None    # the line appended on success
    log_path: Optional[str] = None

    @property
    def messages(self) -> List[str]:
        return [v.message for v in self.violations]

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "violations": [{"rule": v.rule, "message": v.message} for v in self.violations],
            "error": self.error,
            "line": self.line,
        }
