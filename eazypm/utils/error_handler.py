"""Centralized error handler for eazypm commands."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from eazypm.utils.logging import logger


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs unexpected errors and turns them into ClickException.

    click's own exceptions (Exit, Abort, ClickException) pass through untouched
    so exit codes chosen by the command survive.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.exceptions.Exit, click.Abort, click.ClickException):
            raise
        except Exception as e:
            error_type = type(e).__name__
            error_msg = str(e)

            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=error_msg,
            )

            raise click.ClickException(f"{error_type}: {error_msg}") from e

    return wrapper
