"""
Backend to support Brother QL-series printers via PyUSB.
Works on Mac OS X and Linux.

Requires PyUSB: https://github.com/walac/pyusb/
Install via `pip install pyusb`
"""

import time

import usb.core
import usb.util

from .abstract import BaseBrotherQLBackend
from .retry_strategies import RetryStrategy

PRINTER_INTERFACE_CLASS = 7


class BrotherQLBackendPyUSB(BaseBrotherQLBackend):
    """
    BrotherQL backend using PyUSB
    """

    RETRY_STRATEGY = RetryStrategy.TRY_TWICE

    WRITE_TIMEOUT = 15000.0  # ms

    def __init__(self, device_specifier: str | usb.core.Device, read_timeout: float | None = None) -> None:
        """
        device_specifier: string or pyusb.core.Device: identifier of the \
            format usb://idVendor:idProduct/iSerialNumber or pyusb.core.Device instance.
        """
        self.dev: usb.core.Device | None = None
        self.was_kernel_driver_active = False
        if read_timeout is not None:
            self.read_timeout = read_timeout

        if isinstance(device_specifier, usb.core.Device):
            self.dev = device_specifier
        else:
            vendor, product, serial = BrotherQLBackendPyUSB.extract_vendor_product_serial_from_device_identifier(device_specifier)
            self.dev = usb.core.find(idVendor=vendor, idProduct=product, custom_match=_SerialMatch(serial))

        if self.dev is None:
            raise ValueError("Device not found")

        try:
            if self.dev.is_kernel_driver_active(0):
                self.dev.detach_kernel_driver(0)
                self.was_kernel_driver_active = True
        except NotImplementedError:
            pass

        # set the active configuration. With no arguments, the first configuration will be the active one
        self.dev.set_configuration()

        cfg = self.dev.get_active_configuration()
        intf = usb.util.find_descriptor(cfg, bInterfaceClass=PRINTER_INTERFACE_CLASS)
        if intf is None:
            raise ValueError("Device has no printer interface")

        ep_match_in = lambda e: usb.util.endpoint_direction(e.bEndpointAddress) == usb.util.ENDPOINT_IN
        ep_match_out = lambda e: usb.util.endpoint_direction(e.bEndpointAddress) == usb.util.ENDPOINT_OUT

        self.read_dev = usb.util.find_descriptor(intf, custom_match=ep_match_in)
        self.write_dev = usb.util.find_descriptor(intf, custom_match=ep_match_out)

        if self.read_dev is None or self.write_dev is None:
            raise ValueError("Printer interface lacks bulk endpoints")

    def _raw_read(self, length: int, timeout: float) -> bytes:
        try:
            # pyusb Device.read() operations return array() type - convert it to bytes()
            # a timeout of 0 ms means "wait forever" to libusb
            return bytes(self.read_dev.read(length, max(1, int(timeout * 1000))))
        except usb.core.USBTimeoutError:
            return b""

    def _read(self, length: int, timeout: float) -> bytes:
        match self.RETRY_STRATEGY:
            case RetryStrategy.TRY_TWICE:
                start = time.monotonic()
                data = self._raw_read(length, timeout)
                if len(data) >= length:
                    return data
                remaining = timeout - (time.monotonic() - start)
                if remaining > 0:
                    data += self._raw_read(length - len(data), remaining)
                return data
            case _:
                raise NotImplementedError("Unsupported Retry Strategy")

    def _write(self, data: bytes) -> None:
        self.write_dev.write(data, int(self.WRITE_TIMEOUT))

    def _dispose(self) -> None:
        if self.dev is None:
            return
        usb.util.dispose_resources(self.dev)
        if self.was_kernel_driver_active:
            self.dev.attach_kernel_driver(0)
        self.dev = None

    @staticmethod
    def extract_vendor_product_serial_from_device_identifier(device_identifier: str) -> tuple[int, int, str]:
        device_identifier = device_identifier.removeprefix("usb://")
        vendor_product, _, serial = device_identifier.partition("/")
        vendor, _, product = vendor_product.partition(":")
        vendor, product = int(vendor, 16), int(product, 16)
        return vendor, product, serial


class _SerialMatch:
    def __init__(self, serial: str) -> None:
        self._serial = serial

    def __call__(self, device: usb.core.Device) -> bool:
        if not self._serial:
            return True
        try:
            return usb.util.get_string(device, device.iSerialNumber) == self._serial
        except (usb.core.USBError, ValueError):
            return False
