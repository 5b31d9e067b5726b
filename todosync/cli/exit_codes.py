"""
Exit code definitions for the todosync CLI.

Exit Codes:
    0   - SUCCESS: The action completed with a 2xx response
    1   - ERROR: Non-2xx response, transport failure, unknown todo id
    4   - CONFIG_ERROR: Invalid config file or API base
    130 - INTERRUPTED: User pressed Ctrl+C (SIGINT)

Usage:
    from todosync.cli.exit_codes import ExitCode

    return ExitCode.SUCCESS
"""


class ExitCode:
    """Exit code constants for the todosync CLI."""

    SUCCESS = 0
    """The action completed with a 2xx response."""

    ERROR = 1
    """Non-2xx response, transport failure, or bad arguments."""

    CONFIG_ERROR = 4
    """Invalid config file or API base."""

    INTERRUPTED = 130
    """User pressed Ctrl+C (128 + SIGINT=2)."""
