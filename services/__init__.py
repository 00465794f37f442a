"""
game-inhibit services.
Desktop idle inhibition over the session bus and supervision of the wrapped command.
"""

from .inhibit import open_session_bus, request_all_inhibitions
from .supervisor import run_and_wait, wait_forever
