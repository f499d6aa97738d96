from __future__ import annotations

import pytest

from brother_ql_raster.backends.abstract import BaseBrotherQLBackend
from brother_ql_raster.control.constants import RespPhaseTypes, RespStatusTypes
from brother_ql_raster.control.response import PrinterStatus
from brother_ql_raster.settings import DriverSettings


class ScriptedBackend(BaseBrotherQLBackend):
    """
    Records everything written and answers each read with the next scripted frame.

    A None entry answers one read with nothing, like an idle back-channel.
    """

    def __init__(self, responses=()) -> None:
        self.written: list[bytes] = []
        self.responses = list(responses)
        self.reads = 0

    def _read(self, length: int, timeout: float) -> bytes:
        self.reads += 1
        if not self.responses:
            return b""
        response = self.responses.pop(0)
        if response is None:
            return b""
        if isinstance(response, Exception):
            raise response
        return response

    def _write(self, data: bytes) -> None:
        self.written.append(bytes(data))

    def _dispose(self) -> None:
        pass

    @property
    def data(self) -> bytes:
        return b"".join(self.written)


@pytest.fixture
def backend_factory():
    return ScriptedBackend


@pytest.fixture
def fast_settings() -> DriverSettings:
    return DriverSettings(settle_delay=0, poll_interval=0, read_timeout=0)


@pytest.fixture
def no_sleep(monkeypatch):
    sleeps: list[float] = []
    monkeypatch.setattr("brother_ql_raster.driver.time.sleep", sleeps.append)
    return sleeps


@pytest.fixture
def frame():
    """Build a raw 32 byte status frame."""

    def _frame(**fields) -> bytes:
        return PrinterStatus(**fields).to_bytes()

    return _frame


@pytest.fixture
def frames(frame):
    """Commonly used status frames."""
    return {
        "reply": frame(status_type=RespStatusTypes.REPLY_TO_STATUS_REQUEST, printer_id=0x32),
        "printing": frame(status_type=RespStatusTypes.PHASE_CHANGE, phase_type=RespPhaseTypes.PRINTING_STATE),
        "waiting": frame(status_type=RespStatusTypes.PHASE_CHANGE, phase_type=RespPhaseTypes.WAITING_TO_RECEIVE),
        "completed": frame(status_type=RespStatusTypes.PRINTING_COMPLETED),
        "corrupt": frame(print_head_mark=0x00, status_type=RespStatusTypes.PRINTING_COMPLETED),
        "short": frame()[:20],
    }
