from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from gi.repository import Gio, GLib
from loguru import logger
from pydbus import SessionBus

# org.freedesktop.portal.Inhibit flags: 1 logout, 2 user switch, 4 suspend, 8 idle
PORTAL_INHIBIT_IDLE = 8

# Use the bus default
CALL_TIMEOUT = -1


@dataclass(frozen=True)
class InhibitRequest:
    target: str
    bus_name: str
    object_path: str
    interface: str
    method: str
    signature: str
    build_args: Callable[[str, str], Tuple]

    def parameters(self, reason: str, application: str) -> GLib.Variant:
        return GLib.Variant(f"({self.signature})", self.build_args(reason, application))


@dataclass
class InhibitOutcome:
    request: InhibitRequest
    ok: bool
    error: Optional[str] = None


def _portal_args(reason: str, application: str) -> Tuple:
    # Empty window identifier, the application is not known to the portal
    return ("", PORTAL_INHIBIT_IDLE, {"reason": GLib.Variant("s", reason)})


def _reason_and_application(reason: str, application: str) -> Tuple:
    return (reason, application)


INHIBIT_REQUESTS = (
    InhibitRequest(
        target="idle",
        bus_name="org.freedesktop.portal.Desktop",
        object_path="/org/freedesktop/portal/desktop",
        interface="org.freedesktop.portal.Inhibit",
        method="Inhibit",
        signature="sua{sv}",
        build_args=_portal_args,
    ),
    InhibitRequest(
        target="screensaver",
        bus_name="org.freedesktop.ScreenSaver",
        object_path="/org/freedesktop/ScreenSaver",
        interface="org.freedesktop.ScreenSaver",
        method="Inhibit",
        signature="ss",
        build_args=_reason_and_application,
    ),
    InhibitRequest(
        target="power saving",
        bus_name="org.freedesktop.PowerManagement.Inhibit",
        object_path="/org/freedesktop/PowerManagement/Inhibit",
        interface="org.freedesktop.PowerManagement.Inhibit",
        method="Inhibit",
        signature="ss",
        build_args=_reason_and_application,
    ),
)


def open_session_bus():
    """Connect to the user's session bus. Raises GLib.Error when there is none."""
    return SessionBus()


def inhibit(bus, request: InhibitRequest, reason: str, application: str) -> InhibitOutcome:
    """
    Make a single inhibition call and report how it went.
    A failed call is logged and never raised to the caller.
    """
    logger.debug(f"Trying to inhibit {request.target} via {request.interface} interface")
    try:
        reply = bus.con.call_sync(
            request.bus_name,
            request.object_path,
            request.interface,
            request.method,
            request.parameters(reason, application),
            None,
            Gio.DBusCallFlags.NONE,
            CALL_TIMEOUT,
            None,
        )
    except GLib.Error as e:
        logger.debug("Failed.")
        logger.error(f"Failed to inhibit {request.target}: {e.message}")
        return InhibitOutcome(request, False, e.message)

    # The cookie is not kept, the inhibition lasts as long as our connection
    del reply
    logger.debug("Ok.")
    return InhibitOutcome(request, True)


def request_all_inhibitions(bus, reason: str, application: str) -> None:
    # All requests are attempted regardless of earlier outcomes
    for request in INHIBIT_REQUESTS:
        inhibit(bus, request, reason, application)
