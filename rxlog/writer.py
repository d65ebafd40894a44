"""
Append-only text logs and the line formats written to them.
"""

import logging
import os
from typing import List

from rxlog.models import Prescription

logger = logging.getLogger(__name__)


class LogWriteError(OSError):
    """Raised when a line could not be appended to a log file."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Error writing to {path}: {cause}")
        self.path = path
        self.cause = cause


class AppendOnlyLog:
    """A text file that only ever grows by whole lines.

    Each ``append`` opens, writes and closes the file; nothing is held open
    between calls. The file is created on first write, its directory is not.
    """

    def __init__(self, path):
        self.path = os.fspath(path)

    def __repr__(self):
        return f"AppendOnlyLog({self.path!r})"

    def append(self, line: str) -> None:
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.error("Could not append to %s: %s", self.path, e)
            raise LogWriteError(self.path, e) from e
        logger.info("Appended line to %s", self.path)

    def read_lines(self) -> List[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.read().split("\n")
        except FileNotFoundError:
            return []
        if lines[-1] == "":
            lines.pop()
        return lines

    def is_writable(self) -> bool:
        """True if the file exists and is writable, or could be created."""
        if os.path.exists(self.path):
            return os.access(self.path, os.W_OK)
        directory = os.path.dirname(os.path.abspath(self.path))
        return os.path.isdir(directory) and os.access(directory, os.W_OK)


class MemoryLog:
    """In-memory stand-in for ``AppendOnlyLog``."""

    def __init__(self, path="<memory>"):
        self.path = path
        self.lines: List[str] = []

    def append(self, line: str) -> None:
        self.lines.append(line)

    def read_lines(self) -> List[str]:
        return list(self.lines)

    def is_writable(self) -> bool:
        return True


def format_exam_date(exam_date) -> str:
    """dd/mm/yyyy with every part zero-padded, whatever the year."""
    return f"{exam_date.day:02d}/{exam_date.month:02d}/{exam_date.year:04d}"


def format_prescription_line(record: Prescription) -> str:
    return (
        f"ID: {record.id}, "
        f"Name: {record.first_name} {record.last_name}, "
        f"Address: {record.address}, "
        f"Sphere: {record.sphere:.2f}, "
        f"Cylinder: {record.cylinder:.2f}, "
        f"Axis: {record.axis:.2f}, "
        f"Date: {format_exam_date(record.examination_date)}, "
        f"Optometrist: {record.optometrist}"
    )


def format_remark_line(remark: str, category: str) -> str:
    return f"Remark: {remark}, Category: {category}"
