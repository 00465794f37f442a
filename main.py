import signal
import sys

import setproctitle
from gi.repository import GLib
from loguru import logger

from config.data import APP_NAME, load_config
from services import open_session_bus, request_all_inhibitions, run_and_wait, wait_forever
from utils.functions import setup_logging


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv

    config = load_config(argv)
    setup_logging(config.verbose)

    # Let Ctrl-C end the wrapper like any other process instead of raising
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    try:
        bus = open_session_bus()
    except GLib.Error as e:
        logger.error(f"Failed to connect to user bus: {e.message}")
        return 1

    request_all_inhibitions(bus, config.reason, config.application)

    if not config.command:
        wait_forever()

    command, *args = config.command
    return run_and_wait(command, args)


def run() -> None:
    setproctitle.setproctitle(APP_NAME)
    sys.exit(main())


if __name__ == "__main__":
    run()
