"""
Backend to support Brother QL-series printers via the linux kernel USB printer interface.
Works on Linux.
"""

import os
import select
import time

from .abstract import BaseBrotherQLBackend
from .retry_strategies import RetryStrategy


class BrotherQLBackendLinuxKernel(BaseBrotherQLBackend):
    """
    BrotherQL backend using the Linux Kernel USB Printer Device Handles
    """

    RETRY_STRATEGY = RetryStrategy.SELECT

    def __init__(self, device_specifier: str | int, read_timeout: float | None = None) -> None:
        """
        device_specifier: string or os.open(): identifier in the \
            format file:///dev/usb/lp0 or os.open() raw device handle.
        """
        self.dev = None
        self.dev = BrotherQLBackendLinuxKernel.get_device(device_specifier)
        self.write_dev = self.dev
        self.read_dev = self.dev
        if read_timeout is not None:
            self.read_timeout = read_timeout

    def _read(self, length: int, timeout: float) -> bytes:
        match self.RETRY_STRATEGY:
            case RetryStrategy.TRY_TWICE:
                data = os.read(self.read_dev, length)
                if data:
                    return data
                time.sleep(timeout)
                return os.read(self.read_dev, length)
            case RetryStrategy.SELECT:
                data = b""
                deadline = time.monotonic() + timeout
                while len(data) < length:
                    # a zero timeout still polls once
                    remaining = max(0.0, deadline - time.monotonic())
                    result, _, _ = select.select([self.read_dev], [], [], remaining)
                    if self.read_dev not in result:
                        break
                    chunk = os.read(self.read_dev, length - len(data))
                    if not chunk:
                        break
                    data += chunk
                return data
            case _:
                raise NotImplementedError("Unsupported Retry Strategy")

    def _write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.write_dev, view)
            view = view[written:]

    def _dispose(self) -> None:
        if self.dev is not None:
            os.close(self.dev)
            self.dev = None

    @staticmethod
    def get_device(device_identifier: str | int) -> int:
        if isinstance(device_identifier, str):
            if device_identifier.startswith("file://"):
                device_identifier = device_identifier[7:]
            return os.open(device_identifier, os.O_RDWR)
        elif isinstance(device_identifier, int):
            return device_identifier
        else:
            raise NotImplementedError("Currently the printer can be specified either via an appropriate string or via an os.open() handle.")
