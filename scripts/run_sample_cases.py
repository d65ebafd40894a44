#!/usr/bin/env python3
"""
Run the fixed sample prescriptions and remarks and compare each outcome
with the expected one. By default the logs go to a temporary directory.
"""

import argparse
import logging
import os
import sys
import tempfile

from rxlog.config import LOG_FORMAT, LOG_LEVEL
from rxlog.prescription import PrescriptionDesk
from rxlog.samples import run_samples


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--use-config-logs", action="store_true",
                        help="write to the configured log files instead of a temp directory")
    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    with tempfile.TemporaryDirectory() as tmp:
        if args.use_config_logs:
            desk = PrescriptionDesk()
        else:
            desk = PrescriptionDesk.from_paths(os.path.join(tmp, "presc.txt"),
                                               os.path.join(tmp, "remark.txt"))

        outcomes = run_samples(desk)
        for o in outcomes:
            status = "✓ PASS" if o.matched else "✗ FAIL"
            verdict = "accepted" if o.actual else "rejected"
            print(f"{status}: {o.kind} case {o.case_id} {verdict}")
            for message in o.messages:
                print(f"    {message}")

        written = len(desk.prescription_log.read_lines()), len(desk.remark_log.read_lines())

    failed = [o for o in outcomes if not o.matched]
    print(f"\nLines written: {written[0]} prescription(s), {written[1]} remark(s)")
    print(f"Total: {len(outcomes) - len(failed)}/{len(outcomes)} cases as expected")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
