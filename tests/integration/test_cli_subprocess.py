from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[2] / "src"


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(SRC_ROOT), env.get("PYTHONPATH", "")) if part
    )
    return subprocess.run(
        [sys.executable, "-m", "linelength.cli", *args],
        capture_output=True,
        text=True,
        env=env,
        check=False,
    )


def test_exit_code_zero_with_open_failures(tmp_path: Path) -> None:
    path = tmp_path / "ok.txt"
    path.write_text("hello\n", encoding="utf-8")

    completed = _run(str(path), str(tmp_path / "absent.txt"))

    assert completed.returncode == 0
    lines = completed.stdout.splitlines()
    assert lines[0] == "File".ljust(len(str(path))) + " Length Index"
    assert lines[1].split() == [str(path), "5", "0"]
    assert "absent.txt" in lines[2]


def test_usage_error_exits_nonzero() -> None:
    completed = _run()

    assert completed.returncode == 2
    assert completed.stdout == ""


def test_decode_failure_exits_one(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes("café\n".encode("latin-1"))

    completed = _run(str(path))

    assert completed.returncode == 1
    assert completed.stdout == ""
    assert str(path) in completed.stderr


def test_directory_argument_exits_one(tmp_path: Path) -> None:
    path = tmp_path / "ok.txt"
    path.write_text("hello\n", encoding="utf-8")

    completed = _run(str(path), str(tmp_path))

    assert completed.returncode == 1
    assert completed.stdout == ""
    assert f"Unable to read file {tmp_path} at line 0" in completed.stderr
