import io
import os
import time

import pytest

from brother_ql_raster.backends import Backend
from brother_ql_raster.backends.linux_kernel import BrotherQLBackendLinuxKernel
from brother_ql_raster.backends.stream import BrotherQLBackendStream


@pytest.mark.parametrize(
    "identifier,backend",
    [
        ("usb://0x04f9:0x2028", Backend.PYUSB),
        ("0x04f9:0x2028", Backend.PYUSB),
        ("file:///dev/usb/lp0", Backend.LINUX_KERNEL),
        ("/dev/usb/lp1", Backend.LINUX_KERNEL),
        ("-", Backend.STREAM),
        ("stream:///tmp/out.bin", Backend.STREAM),
    ],
)
def test_detect(identifier: str, backend: Backend) -> None:
    assert Backend.detect(identifier) is backend


def test_detect_unknown() -> None:
    with pytest.raises(ValueError):
        Backend.detect("tcp://192.168.1.21:9100")


def test_stream_backend_writes_and_reads_frames() -> None:
    output = io.BytesIO()
    backchannel = io.BytesIO(b"\x80" * 32 + b"\x80" * 10)
    backend = BrotherQLBackendStream(output, backchannel)
    backend.write(b"\x1B\x40")
    assert output.getvalue() == b"\x1B\x40"
    assert backend.read(32) == b"\x80" * 32
    assert backend.read(32) == b"\x80" * 10
    assert backend.read(32) == b""


def test_stream_backend_without_backchannel_reads_nothing() -> None:
    backend = BrotherQLBackendStream(io.BytesIO())
    assert backend.read(32) == b""


def test_stream_backend_owns_opened_file(tmp_path) -> None:
    target = tmp_path / "out.bin"
    with BrotherQLBackendStream("stream://" + str(target)) as backend:
        backend.write(b"\x0C")
    assert target.read_bytes() == b"\x0C"


def test_stream_backend_reads_from_fd_with_timeout() -> None:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"\x80" * 12)
        backend = BrotherQLBackendStream(io.BytesIO(), read_fd, read_timeout=0.05)
        assert backend.read(32) == b"\x80" * 12
        assert backend.read(32) == b""
        backend.dispose()
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_linux_kernel_backend_on_pipe() -> None:
    read_fd, write_fd = os.pipe()
    reader = BrotherQLBackendLinuxKernel(read_fd, read_timeout=0.05)
    writer = BrotherQLBackendLinuxKernel(write_fd)
    try:
        os.write(write_fd, b"\x80" * 32)
        assert reader.read(32) == b"\x80" * 32
        assert reader.read(32) == b""
        writer.write(b"\x1B\x40")
        assert os.read(read_fd, 2) == b"\x1B\x40"
    finally:
        # the backends own and close the descriptors
        reader.dispose()
        writer.dispose()


def test_linux_kernel_backend_returns_at_end_of_file() -> None:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, b"\x80" * 12)
    os.close(write_fd)
    reader = BrotherQLBackendLinuxKernel(read_fd, read_timeout=5.0)
    try:
        start = time.monotonic()
        assert reader.read(32) == b"\x80" * 12
        assert reader.read(32) == b""
        assert time.monotonic() - start < 1.0
    finally:
        reader.dispose()


def test_zero_timeout_still_reads_pending_data() -> None:
    read_fd, write_fd = os.pipe()
    reader = BrotherQLBackendLinuxKernel(read_fd)
    try:
        assert reader.read(32, 0) == b""
        os.write(write_fd, b"\x80" * 32)
        assert reader.read(32, 0) == b"\x80" * 32
    finally:
        reader.dispose()
        os.close(write_fd)


def test_stream_backend_zero_timeout_reads_pending_data() -> None:
    read_fd, write_fd = os.pipe()
    try:
        backend = BrotherQLBackendStream(io.BytesIO(), read_fd)
        assert backend.read(32, 0) == b""
        os.write(write_fd, b"\x80" * 32)
        assert backend.read(32, 0) == b"\x80" * 32
        backend.dispose()
    finally:
        os.close(read_fd)
        os.close(write_fd)
