"""Synchronous command-interpreter execution."""

import subprocess
from typing import Optional

from .logger import get_logger

logger = get_logger(__name__)


def run_shell(command: str) -> Optional[int]:
    """
    Run ``command`` through the system shell and wait for it to finish.

    Returns the shell's exit status, or None when the shell process could not
    be started at all. Non-zero and signal statuses are returned as-is; only a
    failed launch yields None.
    """
    logger.debug("Running: %s", command)
    try:
        # stdio is inherited so the help text lands on the user's terminal
        result = subprocess.run(command, shell=True)
    except OSError as e:
        logger.warning("Could not launch shell for %r: %s", command, e)
        return None

    logger.debug("Shell exited with status %d", result.returncode)
    return result.returncode
