"""
Engines are seeded from the clock, so separate processes must not replay the
same sequence.
"""
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

SCRIPT = (
    "from randomize import make_generator\n"
    "g = make_generator(0, 2**62)\n"
    "print(' '.join(str(g()) for _ in range(20)))\n"
)


def _run_once() -> str:
    result = subprocess.run(
        [sys.executable, "-c", SCRIPT],
        cwd=ROOT,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def test_sequences_differ_between_processes():
    first = _run_once()
    second = _run_once()
    assert len(first.split()) == 20
    assert first != second
