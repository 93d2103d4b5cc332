"""Decorators for command functions."""

from __future__ import annotations

import functools
import time
import traceback
from collections.abc import Callable

import typer
from rich.console import Console
from rich.markup import escape

from iceland.errors import ERROR_GENERAL, IcelandError, get_exit_code_name
from iceland.logger import get_logger

err_console = Console(stderr=True)


def format_error(message: str) -> None:
    err_console.print(f"[red]✗ {escape(message)}[/red]")


def format_warning(message: str) -> None:
    err_console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def command_wrapper(func: Callable):
    """Log the command and turn reported errors into a non-zero exit."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except IcelandError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                get_exit_code_name(e.exit_code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
