"""
Text rendering of submission results for the console.
"""

from typing import List

from rxlog.models import SubmissionResult

_KINDS = {
    "prescription": ("Prescription", "prescription"),
    "remark": ("Remark", "remark"),
}


def render_result(result: SubmissionResult, kind: str = "prescription") -> List[str]:
    """Return the lines shown to the user for one submission.

    Violations come first, one per line, then the outcome. Write failures are
    not included; use ``render_error`` for those so they can go to stderr.
    """
    title, noun = _KINDS[kind]
    if result.success:
        return [f"{title} added to {result.log_path}.", f"{title} added successfully!"]
    return result.messages + [f"Failed to add {noun}."]


def render_error(result: SubmissionResult) -> List[str]:
    return [result.error] if result.error else []
