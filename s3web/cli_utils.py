"""
Common CLI utilities and decorators for consistent command behavior.
"""

import json
import logging
import sys
from functools import wraps

import click

from .errors import RemoteError
from .exit_codes import INTERRUPTED, get_exit_code_for_exception

logger = logging.getLogger(__name__)


def handle_errors(func):
    """
    Decorator that turns errors into a JSON error line and an exit code.

    - RemoteError subclasses exit with their own exit_code
    - Click exceptions are left to click
    - Anything else is mapped with get_exit_code_for_exception
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo("Interrupted by user", err=True)
            sys.exit(INTERRUPTED)
        except click.ClickException:
            raise
        except RemoteError as e:
            logger.debug(f"{type(e).__name__}: {e}")
            error_obj = {
                "error": str(e),
                "type": type(e).__name__,
                "exit_code": e.exit_code
            }
            print(json.dumps(error_obj, ensure_ascii=False), flush=True)
            sys.exit(e.exit_code)
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            error_obj = {
                "error": str(e),
                "type": type(e).__name__
            }
            print(json.dumps(error_obj, ensure_ascii=False), flush=True)
            sys.exit(get_exit_code_for_exception(e))

    return wrapper
