#!/usr/bin/env python
"""Local quality checks and tests runner.

Runs formatting, import ordering, lint, type, dead code and complexity
checks followed by the test suite with coverage.

Usage:
    python run_quality_checks.py                    # Run all checks (no fixes)
    python run_quality_checks.py --fix              # Run all checks + auto fixes
    python run_quality_checks.py --skip lint type   # Skip some checks
    python run_quality_checks.py --verbose          # Detailed output
"""

import argparse
import subprocess
import sys
from typing import Callable, Optional

PACKAGES = ["stopwatch", "stopwatch_gui"]
TESTS_DIR = "tests"
DIRS_TO_CHECK = [*PACKAGES, TESTS_DIR]

CHECK_NAMES = ("formatting", "imports", "lint", "type", "deadcode", "complexity", "tests")


class CheckRunner:
    """Runs quality checks and records which ones passed."""

    def __init__(self, fix: bool = False, verbose: bool = False, skip_checks: Optional[list[str]] = None):
        self.fix = fix
        self.verbose = verbose
        self.skip_checks = set(skip_checks or [])
        self.failed_checks: list[str] = []
        self.passed_checks: list[str] = []

    def run_command(self, cmd: list[str], name: str, capture: bool = False) -> bool:
        """Run a command and return True if it exited with status 0."""
        print(f"\n{'=' * 70}")
        print(f"> {name}: {' '.join(cmd)}")
        print(f"{'=' * 70}")

        try:
            if capture and not self.verbose:
                result = subprocess.run(cmd, check=False, capture_output=True, text=True)
                if result.returncode != 0:
                    print(result.stdout)
                    print(result.stderr)
            else:
                result = subprocess.run(cmd, check=False)
        except FileNotFoundError as e:
            print(f"Error: {e}")
            print("   Install the dev tools: pip install -e '.[dev,test]'")
            self.failed_checks.append(name)
            return False

        if result.returncode == 0:
            print(f"PASS {name}")
            self.passed_checks.append(name)
            return True
        print(f"FAIL {name}")
        self.failed_checks.append(name)
        return False

    def check_formatting(self) -> bool:
        if self.fix:
            return self.run_command(["black", *DIRS_TO_CHECK], "Black (auto-fix)")
        return self.run_command(["black", "--check", *DIRS_TO_CHECK], "Black", capture=True)

    def check_imports(self) -> bool:
        if self.fix:
            return self.run_command(["isort", *DIRS_TO_CHECK], "isort (auto-fix)")
        return self.run_command(["isort", "--check-only", *DIRS_TO_CHECK], "isort", capture=True)

    def check_lint(self) -> bool:
        return self.run_command(["pylint", *PACKAGES], "Pylint")

    def check_type(self) -> bool:
        return self.run_command(["mypy", *PACKAGES], "Mypy")

    def check_deadcode(self) -> bool:
        return self.run_command(["vulture", *PACKAGES, "examples"], "Vulture")

    def check_complexity(self) -> bool:
        return self.run_command(["radon", "cc", *PACKAGES, "-a"], "Radon")

    def check_tests(self) -> bool:
        return self.run_command(
            [
                "pytest",
                "--cov=stopwatch",
                "--cov=stopwatch_gui",
                "--cov-report=term-missing",
                "--cov-report=xml",
                TESTS_DIR,
            ],
            "Pytest + Coverage",
        )

    def print_summary(self) -> None:
        print(f"\n{'=' * 70}")
        print("SUMMARY")
        print(f"{'=' * 70}")
        for check in self.passed_checks:
            print(f"   passed: {check}")
        for check in self.failed_checks:
            print(f"   FAILED: {check}")
        if not self.failed_checks:
            print("\nAll checks passed!")

    def run_all(self) -> int:
        """Run every check not skipped. Returns the process exit status."""
        checks: dict[str, Callable[[], bool]] = {
            name: getattr(self, f"check_{name}") for name in CHECK_NAMES
        }
        for name, check in checks.items():
            if name in self.skip_checks:
                print(f"Skipping {name}")
                continue
            check()

        self.print_summary()
        return 0 if not self.failed_checks else 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run local quality checks and tests with optional auto-fixes",
    )
    parser.add_argument(
        "--fix",
        "--apply",
        action="store_true",
        dest="fix",
        help="Automatically fix formatting and import order",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show output from every command")
    parser.add_argument(
        "--skip",
        nargs="+",
        default=[],
        choices=CHECK_NAMES,
        help="Checks to skip",
    )
    args = parser.parse_args()

    return CheckRunner(fix=args.fix, verbose=args.verbose, skip_checks=args.skip).run_all()


if __name__ == "__main__":
    sys.exit(main())
