import signal
import sys

from loguru import logger

from config.data import APP_NAME


def setup_logging(verbose: bool = False) -> None:
    """
    Route all diagnostics to stderr.
    Debug traces are only shown when verbose output was requested.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=f"{APP_NAME}: {{message}}",
        colorize=False,
    )


def signal_name(signum: int) -> str:
    """Get a readable description of a signal number, e.g. 'Killed'."""
    try:
        name = signal.strsignal(signum)
    except ValueError:
        name = None
    return name or f"signal {signum}"
