"""Help message invoker backed by fish's __fish_print_help."""

from .invoker import CMD_LEN, HELP_ERR, format_help_command, print_help

__all__ = ['CMD_LEN', 'HELP_ERR', 'format_help_command', 'print_help']
