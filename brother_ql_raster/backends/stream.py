"""
Backend writing to an already open binary stream.

This is how a print filter talks to the printer: the instructions go to stdout
and the printer's status frames come back on a separate back-channel (file
descriptor 3 under CUPS). Any binary file object works as output; the
back-channel may be a file object, a raw file descriptor or absent.
"""

import io
import os
import select
import sys
import time
from typing import BinaryIO

from .abstract import BaseBrotherQLBackend

CUPS_BACKCHANNEL_FD = 3


def _fileno(stream) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, io.UnsupportedOperation):
        return None


class BrotherQLBackendStream(BaseBrotherQLBackend):

    def __init__(self, device_specifier: str | BinaryIO = "-", backchannel: BinaryIO | int | None = None, read_timeout: float | None = None) -> None:
        """
        device_specifier: ``-`` for stdout, ``stream:///path`` or a path \
            to a file to write to, or an open binary file object.
        backchannel: where status frames are read from. With ``-`` and no \
            explicit back-channel, file descriptor 3 is used if it is open.
        """
        self._owns_output = False
        self._owns_backchannel = False
        if read_timeout is not None:
            self.read_timeout = read_timeout

        if device_specifier == "-":
            self.output = sys.stdout.buffer
            if backchannel is None and _fd_is_open(CUPS_BACKCHANNEL_FD):
                backchannel = CUPS_BACKCHANNEL_FD
        elif isinstance(device_specifier, str):
            self.output = open(device_specifier.removeprefix("stream://"), "wb")
            self._owns_output = True
        else:
            self.output = device_specifier

        if isinstance(backchannel, int):
            backchannel = os.fdopen(backchannel, "rb", buffering=0, closefd=False)
            self._owns_backchannel = True
        self.backchannel = backchannel

    def _read(self, length: int, timeout: float) -> bytes:
        if self.backchannel is None:
            return b""
        fd = _fileno(self.backchannel)
        if fd is None:
            # in-memory streams never block
            return self.backchannel.read(length) or b""
        data = b""
        deadline = time.monotonic() + timeout
        while len(data) < length:
            remaining = max(0.0, deadline - time.monotonic())
            result, _, _ = select.select([fd], [], [], remaining)
            if fd not in result:
                break
            chunk = os.read(fd, length - len(data))
            if not chunk:
                break
            data += chunk
        return data

    def _write(self, data: bytes) -> None:
        self.output.write(data)
        self.output.flush()

    def _dispose(self) -> None:
        output = getattr(self, "output", None)
        if output is not None and not output.closed:
            if self._owns_output:
                output.close()
            else:
                output.flush()
        if self._owns_backchannel:
            self.backchannel.close()


def _fd_is_open(fd: int) -> bool:
    try:
        os.fstat(fd)
    except OSError:
        return False
    return True
