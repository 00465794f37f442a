import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

APP_NAME = "game-inhibit"

DEBUG_ENV = "INHIBIT_DEBUG"
REASON_ENV = "INHIBIT_REASON"
DEFAULT_REASON = "A game is running"


@dataclass(frozen=True)
class RuntimeConfig:
    verbose: bool
    reason: str
    application: str
    command: List[str] = field(default_factory=list)


def load_config(argv: List[str], environ: Optional[Mapping[str, str]] = None) -> RuntimeConfig:
    """
    Build the runtime configuration from the command line and environment.
    The environment is read once here and never consulted again.
    """
    if environ is None:
        environ = os.environ

    command = list(argv[1:])
    application = command[0] if command else argv[0]

    return RuntimeConfig(
        verbose=DEBUG_ENV in environ,
        reason=environ.get(REASON_ENV, DEFAULT_REASON),
        application=application,
        command=command,
    )
