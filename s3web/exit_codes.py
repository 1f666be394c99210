"""
Exit codes for the s3web command line.

Errors from :mod:`s3web.errors` carry one of these codes themselves.
"""
import sys
from typing import Optional

SUCCESS = 0
GENERAL_ERROR = 1
USAGE_ERROR = 2          # Bad identifier, option or argument

# 64-113 are free for application use
NOT_FOUND = 64           # Commit does not exist on the remote
API_ERROR = 65           # Remote answered with an error status
CONFIG_ERROR = 66        # Unknown remote type
NETWORK_ERROR = 68       # Metadata document could not be fetched
DATA_ERROR = 70          # Invalid remote properties or config values
INTERRUPTED = 130        # Ctrl+C

# Errors without an exit_code that commands can still hit, e.g. a
# configured remote whose value is not a string
EXCEPTION_EXIT_CODES = {
    'ValueError': DATA_ERROR,
    'TypeError': DATA_ERROR,
}


def get_exit_code_for_exception(exc: BaseException) -> int:
    """
    Get the exit code for an exception.

    Uses the exception's own ``exit_code`` when it has one, then the
    class-name table, then GENERAL_ERROR.
    """
    code = getattr(exc, 'exit_code', None)
    if isinstance(code, int):
        return code
    return EXCEPTION_EXIT_CODES.get(type(exc).__name__, GENERAL_ERROR)


def exit_with_code(code: int, message: Optional[str] = None):
    """Print message to stderr, if given, and exit with code."""
    if message:
        print(message, file=sys.stderr)
    sys.exit(code)
