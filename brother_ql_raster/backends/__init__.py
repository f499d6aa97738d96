from enum import Enum
from typing import Type

from .abstract import BaseBrotherQLBackend


class Backend(Enum):
    PYUSB = "pyusb"
    LINUX_KERNEL = "linux_kernel"
    STREAM = "stream"

    @property
    def printer(self) -> Type[BaseBrotherQLBackend]:
        match self:
            case Backend.PYUSB:
                from . import pyusb as pyusb_backend

                return pyusb_backend.BrotherQLBackendPyUSB
            case Backend.LINUX_KERNEL:
                from . import linux_kernel as linux_kernel_backend

                return linux_kernel_backend.BrotherQLBackendLinuxKernel
            case Backend.STREAM:
                from . import stream as stream_backend

                return stream_backend.BrotherQLBackendStream

    @staticmethod
    def all() -> list[str]:
        return [b.value for b in Backend]

    @staticmethod
    def detect(identifier: str) -> "Backend":
        if identifier.startswith("usb://") or identifier.startswith("0x"):
            return Backend.PYUSB
        elif identifier.startswith("file://") or identifier.startswith("/dev/usb/") or identifier.startswith("lp"):
            return Backend.LINUX_KERNEL
        elif identifier == "-" or identifier.startswith("stream://"):
            return Backend.STREAM
        else:
            raise ValueError(f"Cannot Detect the Backend for identifier: {identifier}")
