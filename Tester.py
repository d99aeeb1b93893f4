import subprocess
import sys

DEFAULT_PATHS = ["tests"]


def build_pytest_args(quiet=False, verbose=False, cov=None, cov_branch=False,
                      cov_report="term-missing", cov_fail_under=None,
                      extra=None) -> list[str]:
    """Translate `test` subcommand options into pytest arguments."""
    args = []

    # verbosity
    if quiet:
        args.append("-q")
    if verbose:
        args.append("-v")

    # coverage (pytest-cov)
    if cov:
        args += ["--cov", cov, "--cov-report", cov_report]
        if cov_branch:
            args.append("--cov-branch")
        if cov_fail_under is not None:
            args += ["--cov-fail-under", str(cov_fail_under)]

    # raw extras, e.g. the JSON report flags
    if extra:
        args += extra

    return args


def run(paths=None, pytest_args=None) -> int:
    """Run pytest and return its exit code."""
    if paths is None:
        paths = DEFAULT_PATHS
    if pytest_args is None:
        pytest_args = ["-q", "-rs"]  # quiet + show skip reasons

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *paths]
    return subprocess.run(cmd).returncode
