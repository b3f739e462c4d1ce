"""Error and warning reporting for the server."""

import sys

ERROR_PREFIX = "\033[1;31mERROR:\033[0m "
WARN_PREFIX = "\033[1;35mWARNING:\033[0m "


class ServerError(Exception):
    """A fatal condition that stops the server or the current operation."""


def format_error(message):
    """Return ``message`` with the coloured error prefix."""
    return ERROR_PREFIX + message


def format_warning(message):
    """Return ``message`` with the coloured warning prefix."""
    return WARN_PREFIX + message


def warning(message):
    """Print a formatted warning line to standard output."""
    sys.stdout.write(format_warning(message) + "\n")
    sys.stdout.flush()