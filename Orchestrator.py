import argparse
import json
import sys
from pathlib import Path

import Tester

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fish_help import print_help  # noqa: E402
from fish_help.logger import get_logger  # noqa: E402

logger = get_logger(__name__)

REPORT_FILE = ".report.json"
COVERAGE_FILE = "coverage.json"


def build_parser():
    p = argparse.ArgumentParser(prog="run", description="Show fish help pages for commands")
    subs = p.add_subparsers(dest="command", required=True)

    # --- help subcommand ---
    help_p = subs.add_parser("help", help="Show the help page for a command")
    help_p.add_argument("name", help="Command to show help for (e.g. set)")

    # --- test subcommand ---
    test_p = subs.add_parser("test", help="Run pytest suite")
    test_p.add_argument(
        "paths",
        nargs="*",
        default=["tests"],
        help="Files/dirs to test (default: tests)",
    )
    test_p.add_argument("-q", "--quiet", action="store_true", help="Quiet pytest output")
    test_p.add_argument("-v", "--verbose", action="store_true", help="Verbose pytest output (-v)")
    test_p.add_argument(
        "--cov",
        nargs="?",
        const="src",
        default="src",
        help="Measure coverage for the given package/path (default: src).",
    )
    test_p.add_argument("--cov-branch", action="store_true", help="Measure branch coverage.")
    test_p.add_argument(
        "--cov-report",
        default="term-missing",
        help="Coverage report type (e.g., term, term-missing, html). Default: term-missing.",
    )
    test_p.add_argument(
        "--fail-under",
        dest="cov_fail_under",
        type=float,
        help="Fail if total coverage percentage is below this value.",
    )

    return p


def cmd_help(args) -> int:
    # Exit status of the help command is never propagated
    print_help(args.name)
    return 0


def cmd_test(args) -> int:
    # Machine-readable artifacts for the summary line
    extra = [
        f"--cov-report=json:{COVERAGE_FILE}",
        "--json-report",
        f"--json-report-file={REPORT_FILE}",
    ]
    pytest_args = Tester.build_pytest_args(
        quiet=args.quiet,
        verbose=args.verbose,
        cov=args.cov,
        cov_branch=args.cov_branch,
        cov_report=args.cov_report,
        cov_fail_under=args.cov_fail_under,
        extra=extra,
    )
    logger.info("Running pytest %s on %s", " ".join(pytest_args), " ".join(args.paths))

    exit_code = Tester.run(paths=args.paths, pytest_args=pytest_args)
    print_test_summary()
    return exit_code


def print_test_summary() -> None:
    """Print "X/Y test cases passed. Z% line coverage achieved." from the JSON reports."""
    try:
        rpt = json.loads(Path(REPORT_FILE).read_text())
        cov = json.loads(Path(COVERAGE_FILE).read_text())

        passed = int(rpt["summary"].get("passed", 0))
        total = int(rpt["summary"]["total"])

        # pytest-cov JSON schema: totals.percent_covered (float)
        pct = float(cov["totals"]["percent_covered"])
        pct_str = f"{pct:.2f}".rstrip("0").rstrip(".")

        print(f"{passed}/{total} test cases passed. {pct_str}% line coverage achieved.")
    except FileNotFoundError:
        print("Note: missing .report.json or coverage.json. "
              "Install/enable plugins: pytest-json-report and pytest-cov.")
    except (KeyError, ValueError) as e:
        print(f"Summary generation failed: {e}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "help":
        return cmd_help(args)
    if args.command == "test":
        return cmd_test(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
