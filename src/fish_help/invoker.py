"""
Show the help page for a command by asking fish to render it.

The invocation is handed to the command shell as a single string:

    fish -c '__fish_print_help <command>'

Invocations that would not fit in CMD_LEN bytes are skipped without any
output; a shell that cannot be started produces HELP_ERR on stderr.
"""

import os

from .fdio import write_loop
from .logger import get_logger
from .shell import run_shell

logger = get_logger(__name__)

CMD_LEN = 1024
HELP_ERR = "Could not show help message\n"
HELP_COMMAND = "fish -c '__fish_print_help {}'"

STDERR_FILENO = 2


def format_help_command(command_name: str) -> str:
    """
    Return the shell command that prints help for ``command_name``.

    Anything from the first NUL character on is dropped from the name.
    """
    return HELP_COMMAND.format(command_name.split("\0", 1)[0])


def print_help(command_name: str) -> None:
    cmd = format_help_command(command_name)

    # Length is measured in the bytes the shell will actually receive
    try:
        cmd_len = len(os.fsencode(cmd))
    except UnicodeEncodeError as e:
        logger.debug("Help command for %.32r is not encodable (%s), skipping",
                     command_name, e)
        return

    if cmd_len >= CMD_LEN:
        logger.debug("Help command for %.32r... exceeds %d bytes, skipping",
                     command_name, CMD_LEN)
        return

    if run_shell(cmd) is None:
        write_loop(STDERR_FILENO, HELP_ERR)
