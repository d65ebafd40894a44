"""
The fixed sample cases must behave as their expected flags say.
"""

import importlib.util
from pathlib import Path

from rxlog.samples import SAMPLE_PRESCRIPTIONS, SAMPLE_REMARKS, run_samples

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "run_sample_cases.py"


def test_every_sample_matches_expectation(memory_desk):
    outcomes = run_samples(memory_desk)
    assert len(outcomes) == len(SAMPLE_PRESCRIPTIONS) + len(SAMPLE_REMARKS)
    assert [o for o in outcomes if not o.matched] == []


def test_only_accepted_samples_are_written(memory_desk):
    run_samples(memory_desk)
    accepted_rx = sum(1 for case in SAMPLE_PRESCRIPTIONS if case[-1])
    accepted_remarks = sum(1 for case in SAMPLE_REMARKS if case[-1])
    assert len(memory_desk.prescription_log.lines) == accepted_rx
    assert len(memory_desk.remark_log.lines) == accepted_remarks


def test_sample_script_exits_zero(capsys):
    spec = importlib.util.spec_from_file_location("run_sample_cases", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert module.main([]) == 0
    out = capsys.readouterr().out
    assert "12/12 cases as expected" in out
    assert "Lines written: 2 prescription(s), 1 remark(s)" in out
