"""
Interactive CLI for entering a prescription and its remarks.
"""

import logging
import sys

from rxlog.config import LOG_FORMAT, LOG_LEVEL
from rxlog.dates import InputError, parse_examination_date, parse_measurement, parse_record_id
from rxlog.models import Prescription
from rxlog.prescription import PrescriptionDesk
from rxlog.report import render_error, render_result


def _show(result, kind):
    for line in render_error(result):
        print(line, file=sys.stderr)
    for line in render_result(result, kind):
        print(line)


def read_prescription(ask=input) -> Prescription:
    """Prompt for every prescription field. Raises InputError on bad input."""
    record_id = parse_record_id(ask("Enter Prescription ID: "))
    first_name = ask("Enter First Name: ")
    last_name = ask("Enter Last Name: ")
    address = ask("Enter Address: ")
    sphere = parse_measurement(ask("Enter Sphere: "), "sphere")
    cylinder = parse_measurement(ask("Enter Cylinder: "), "cylinder")
    axis = parse_measurement(ask("Enter Axis: "), "axis")
    examination_date = parse_examination_date(ask("Enter Examination Date (DD/MM/YYYY): "))
    optometrist = ask("Enter Optometrist Name: ")

    record = Prescription()
    record.set_details(record_id, first_name, last_name, address,
                       sphere, cylinder, axis, examination_date, optometrist)
    return record


def main(desk=None, ask=input):
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    desk = desk or PrescriptionDesk()

    print("=== rxlog: Prescription Entry ===\n")
    print(f"[init] Prescription log: {desk.prescription_log.path}")
    print(f"[init] Remark log: {desk.remark_log.path}\n")

    # ── Prescription ─────────────────────────────────────────────────
    try:
        record = read_prescription(ask)
    except (EOFError, KeyboardInterrupt):
        print("\nExiting.")
        return 0
    except InputError as e:
        print(str(e), file=sys.stderr)
        return 1

    _show(desk.submit_prescription(record), "prescription")

    # ── Remarks ──────────────────────────────────────────────────────
    while True:
        try:
            remark = ask("\nEnter Remark (blank or 'quit' to finish): ")
            if not remark.strip() or remark.strip().lower() in {"quit", "exit"}:
                print("Goodbye.")
                break
            category = ask("Enter Remark Category (Client/Optometrist): ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        _show(desk.submit_remark(record, remark, category), "remark")

    return 0


if __name__ == "__main__":
    sys.exit(main())
