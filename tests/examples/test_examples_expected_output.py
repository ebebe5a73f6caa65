"""Run every ``examples/ex_*/01_*.py`` script and compare stdout with its ``# =>`` comments."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLE_PATHS = sorted((REPO_ROOT / "examples").glob("ex_*/01_*.py"))


def expected_output(path: Path) -> list[str]:
    """Collect the text after ``# =>`` on each line, in source order."""
    return [
        line.split("# =>", maxsplit=1)[1].strip()
        for line in path.read_text(encoding="utf-8").splitlines()
        if "# =>" in line
    ]


def test_examples_are_collected() -> None:
    assert EXAMPLE_PATHS


@pytest.mark.parametrize(
    "path",
    EXAMPLE_PATHS,
    ids=[path.parent.name for path in EXAMPLE_PATHS],
)
def test_example_output(path: Path) -> None:
    pythonpath = [str(REPO_ROOT / "src")]
    if os.environ.get("PYTHONPATH"):
        pythonpath.append(os.environ["PYTHONPATH"])
    env = {**os.environ, "PYTHONPATH": os.pathsep.join(pythonpath)}

    completed = subprocess.run(  # noqa: S603
        [sys.executable, str(path)],
        cwd=path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 0, completed.stderr
    assert completed.stderr == ""
    assert completed.stdout.splitlines() == expected_output(path)
