"""
Submission of prescriptions and remarks: validate, then append.

Nothing is written unless validation returns zero violations, and a
record's remark state changes only after its remark line was appended.
"""

import logging
from datetime import date

from rxlog.config import PRESCRIPTION_LOG_PATH, REMARK_LOG_PATH
from rxlog.models import Prescription, SubmissionResult
from rxlog.validation import canonical_category, validate_prescription, validate_remark
from rxlog.writer import (
    AppendOnlyLog,
    LogWriteError,
    format_prescription_line,
    format_remark_line,
)

logger = logging.getLogger(__name__)

MISSING_DATE_MESSAGE = "Examination date is missing. Please enter in DD/MM/YYYY format."


def submit_prescription(record: Prescription, log) -> SubmissionResult:
    """Validate *record* and append it to *log* if every rule passes."""
    if not isinstance(record.examination_date, date):
        return SubmissionResult(success=False, error=MISSING_DATE_MESSAGE, log_path=log.path)

    violations = validate_prescription(record)
    if violations:
        logger.info("Prescription %s rejected: %s", record.id, [v.rule for v in violations])
        return SubmissionResult(success=False, violations=violations, log_path=log.path)

    line = format_prescription_line(record)
    try:
        log.append(line)
    except LogWriteError as e:
        return SubmissionResult(success=False, error=str(e), log_path=log.path)

    logger.info("Prescription %s written to %s", record.id, log.path)
    return SubmissionResult(success=True, line=line, log_path=log.path)


def submit_remark(record: Prescription, remark: str, category: str, log) -> SubmissionResult:
    """Validate one remark against *record*'s history and append it to *log*.

    On success the category is added to ``record.accepted_remark_categories``
    under its canonical spelling; the log line keeps it as submitted.
    """
    violations = validate_remark(record, remark, category)
    if violations:
        logger.info("Remark on prescription %s rejected: %s",
                    record.id, [v.rule for v in violations])
        return SubmissionResult(success=False, violations=violations, log_path=log.path)

    line = format_remark_line(remark, category)
    try:
        log.append(line)
    except LogWriteError as e:
        return SubmissionResult(success=False, error=str(e), log_path=log.path)

    record.accepted_remark_categories.add(canonical_category(category))
    logger.info("Remark (%s) on prescription %s written to %s", category, record.id, log.path)
    return SubmissionResult(success=True, line=line, log_path=log.path)


class PrescriptionDesk:
    """Binds the prescription and remark logs for repeated submissions."""

    def __init__(self, prescription_log=None, remark_log=None):
        self.prescription_log = prescription_log or AppendOnlyLog(PRESCRIPTION_LOG_PATH)
        self.remark_log = remark_log or AppendOnlyLog(REMARK_LOG_PATH)

    @classmethod
    def from_paths(cls, prescription_path, remark_path):
        return cls(AppendOnlyLog(prescription_path), AppendOnlyLog(remark_path))

    def submit_prescription(self, record: Prescription) -> SubmissionResult:
        return submit_prescription(record, self.prescription_log)

    def submit_remark(self, record: Prescription, remark: str, category: str) -> SubmissionResult:
        return submit_remark(record, remark, category, self.remark_log)
