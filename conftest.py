import signal

import pytest
from gi.repository import GLib
from loguru import logger


class FakeConnection:
    """Stands in for the Gio.DBusConnection behind a pydbus bus."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.calls = []

    def call_sync(
        self,
        bus_name,
        object_path,
        interface,
        method,
        parameters,
        reply_type,
        flags,
        timeout,
        cancellable,
    ):
        self.calls.append((bus_name, object_path, interface, method, parameters.unpack()))
        if bus_name in self.failing:
            raise GLib.Error(
                f"GDBus.Error:org.freedesktop.DBus.Error.ServiceUnknown: "
                f"The name {bus_name} was not provided by any .service files"
            )
        return GLib.Variant("(u)", (42,))


class FakeBus:
    def __init__(self, failing=()):
        self.con = FakeConnection(failing)

    @property
    def called_services(self):
        return [call[0] for call in self.con.calls]


@pytest.fixture
def fake_bus():
    return FakeBus()


@pytest.fixture
def log_messages():
    """Collect everything logged through loguru, debug traces included."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def keep_sigint(monkeypatch):
    """Keep pytest's own SIGINT handling while main() runs."""
    monkeypatch.setattr(signal, "signal", lambda signum, handler: None)
