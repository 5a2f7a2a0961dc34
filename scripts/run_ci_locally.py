#!/usr/bin/env python3
"""
Run the CI checks for sortable_names in the active virtual environment.

Steps:
  1) uv sync --active --extra dev
  2) black --check on the package, scripts and tests (line length 120)
  3) mypy on the package and scripts
  4) pytest with coverage over sortable_names

Commands run from the repository root (the directory holding pyproject.toml).
"""

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional


def repo_root() -> Path:
    here = Path(__file__).resolve().parent
    for d in [here] + list(here.parents):
        if (d / "pyproject.toml").exists():
            return d
    return here


REPO = repo_root()
CHECKED_PATHS = ["sortable_names", "scripts", "tests"]


def uv_exe() -> List[str]:
    uv_path = shutil.which("uv")
    if uv_path:
        return [uv_path]
    print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
    sys.exit(2)


def run(cmd: List[str], *, env: Optional[Dict[str, str]] = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def main() -> None:
    uv = uv_exe()
    run(uv + ["sync", "--active", "--extra", "dev"])
    run(uv + ["run", "--active", "black", *CHECKED_PATHS, "--check", "--line-length", "120"])
    run(uv + ["run", "--active", "mypy", "sortable_names", "scripts", "--ignore-missing-imports"])

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        uv
        + [
            "run",
            "--active",
            "pytest",
            "tests/",
            "--cov=sortable_names",
            "--cov-report=term-missing",
            "--cov-fail-under=90",
        ],
        env=env,
    )

    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)
