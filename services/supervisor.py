import os
import signal
import sys
from typing import List

from loguru import logger

from utils.functions import signal_name

EXIT_SPAWN_FAILED = 1
EXIT_ABNORMAL = 127
SIGNAL_EXIT_BASE = 128

# Ignored by the interpreter at startup, children expect the default
RESET_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGPIPE", "SIGXFSZ") if hasattr(signal, name)
)


def spawn(command: str, args: List[str]) -> int:
    """Start `command` with `args`, searching PATH, and return its pid."""
    return os.posix_spawnp(
        command,
        [command, *args],
        os.environ,
        setsigdef=RESET_SIGNALS,
    )


def wait_for_child(pid: int) -> int:
    """Block until the child changes state and return its raw wait status."""
    while True:
        try:
            _, status = os.waitpid(pid, 0)
            return status
        except InterruptedError:
            continue


def exit_code_for_status(status: int) -> int:
    """
    Translate a raw wait status into our own exit code, the way a shell does:
    the exit code is passed through, death by signal S becomes 128 + S
    and anything else becomes 127.
    """
    if os.WIFEXITED(status):
        code = os.WEXITSTATUS(status)
        if code == 0:
            logger.debug("Child process exited normally")
        else:
            logger.error(f"Child process exited with code {code}")
        return code

    if os.WIFSIGNALED(status):
        signum = os.WTERMSIG(status)
        logger.error(f"Child process killed by signal {signal_name(signum)}")
        return SIGNAL_EXIT_BASE + signum

    logger.error("Child process exited abnormally")
    return EXIT_ABNORMAL


def run_and_wait(command: str, args: List[str]) -> int:
    logger.debug(f"Starting process: {command}")
    try:
        pid = spawn(command, args)
    except OSError as e:
        logger.error(f"Failed to start process: {e.strerror or e}")
        sys.exit(EXIT_SPAWN_FAILED)
    logger.debug(f"Started process {pid}")

    try:
        status = wait_for_child(pid)
    except ChildProcessError:
        logger.error("Child process does not exist")
        return EXIT_ABNORMAL

    return exit_code_for_status(status)


def wait_forever(pause=signal.pause) -> None:
    """Sleep until a signal terminates the process."""
    while True:
        pause()
