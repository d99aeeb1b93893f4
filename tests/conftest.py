# Central place for path setup and shared fixtures
# Run all tests from the repo root: python -m pytest -q -rs

# tests/conftest.py
import sys
import subprocess
from pathlib import Path
import pytest

# Repo root (holds run.py, Orchestrator.py, src/)
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for p in (SRC, ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

CLI = ROOT / "run.py"

@pytest.fixture(scope="session")
def cli_path():
    """Path to the root-level CLI script, or skip if it doesn't exist."""
    if not CLI.exists():
        pytest.skip("Root-level CLI not found (run.py)")
    return CLI

@pytest.fixture
def run_cli(cli_path):
    """Run the CLI and return (code, stdout, stderr)."""
    def _run(*argv: str):
        r = subprocess.run(
            [sys.executable, str(cli_path), *argv],
            capture_output=True, text=True
        )
        return r.returncode, r.stdout, r.stderr
    return _run

@pytest.fixture
def fake_shell(monkeypatch):
    """
    Replace the shell facility used by print_help.

    Returns the list of commands it received; set `fake_shell.status` via
    the returned object's `status` attribute (None means launch failure).
    """
    from fish_help import invoker

    class FakeShell(list):
        status = 0

    calls = FakeShell()

    def _run_shell(command):
        calls.append(command)
        return calls.status

    monkeypatch.setattr(invoker, "run_shell", _run_shell)
    return calls

def pytest_report_header(config):
    """Show which CLI/path pytest is using."""
    first = sys.path[0] if sys.path else "<empty>"
    return [f"CLI: {CLI if CLI.exists() else 'not found'}", f"sys.path[0]: {first}"]
