#!/usr/bin/env python3
"""
Tiny lint/format harness to keep the repo tidy without imposing global configs.
Runs ruff (if installed) and black (if installed) in check mode; otherwise no-ops.
Both come with the `dev` extra.
"""
from __future__ import annotations

import shutil
import subprocess
import sys

PATHS = ["bmi_tracker", "ui", "viz", "tests", "bmi_cli.py", "make_lint.py"]

# tool -> check-mode arguments
LINT_TOOLS = {
    "ruff": ["check"],
    "black": ["--check"],
}


def run(cmd: list[str]) -> int:
    try:
        return subprocess.run(cmd, check=False).returncode
    except FileNotFoundError:
        return 0


def main() -> int:
    rc = 0
    for tool, args in LINT_TOOLS.items():
        if shutil.which(tool):
            rc |= run([tool, *args, *PATHS])
    return rc


if __name__ == "__main__":
    sys.exit(main())
