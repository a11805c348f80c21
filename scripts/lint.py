"""
Lint script runner.
"""
import subprocess
import sys

TARGETS = ["./scratchlang", "./scratch.py"]


def main() -> int:
    """
    Lint the scratch project using flake8 and pylint.
    """
    print("Running flake8...")
    flake8 = subprocess.run([
        "flake8",
        *TARGETS,
        "--max-line-length=110",
        "--exclude=scratchlang/tests",
    ], check=False)

    print("Running pylint...")
    pylint = subprocess.run([
        "pylint",
        *TARGETS,
        "--ignore=tests",
        "--max-line-length=110",
    ], check=False)

    return 1 if flake8.returncode or pylint.returncode else 0


if __name__ == "__main__":
    sys.exit(main())
