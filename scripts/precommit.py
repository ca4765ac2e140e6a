#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.11"
# dependencies = [
# ]
# ///

import subprocess
import sys


def run_command(cmd):
    """Run a command and return its exit code."""
    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, capture_output=False)
    return result.returncode


def main():
    """Lint and test durafmt before committing."""
    checks = [
        ("Ruff check", ["uv", "run", "ruff", "check", "--fix", "src", "tests"]),
        ("Ruff format", ["uv", "run", "ruff", "format", "--check", "src", "tests"]),
        ("Pytest", ["uv", "run", "--extra", "test", "pytest"]),
    ]
    for name, cmd in checks:
        returncode = run_command(cmd)
        if returncode != 0:
            print(f"{name} failed")
            sys.exit(returncode)

    print("All checks passed!")


if __name__ == "__main__":
    main()
