import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class BaseBrotherQLBackend(ABC):
    """
    A byte-stream device plus its status back-channel.

    :py:meth:`write` must hand the data to the device before returning.
    :py:meth:`read` returns whatever arrived within the timeout, which may be
    fewer bytes than requested or nothing at all.
    """

    READ_TIMEOUT = 10.0  # s

    @abstractmethod
    def __init__(self, device_specifier=None) -> None:
        pass

    @abstractmethod
    def _read(self, length: int, timeout: float) -> bytes:
        pass

    @abstractmethod
    def _write(self, data: bytes) -> None:
        pass

    @abstractmethod
    def _dispose(self) -> None:
        pass

    @property
    def read_timeout(self) -> float:
        return getattr(self, "_read_timeout", self.READ_TIMEOUT)

    @read_timeout.setter
    def read_timeout(self, value: float) -> None:
        self._read_timeout = value

    def read(self, length: int = 32, timeout: float | None = None) -> bytes:
        if timeout is None:
            timeout = self.read_timeout
        try:
            ret_bytes = self._read(length, timeout)
            if ret_bytes:
                logger.debug("Read %d bytes.", len(ret_bytes))
            return ret_bytes
        except Exception as e:
            logger.debug("Error reading... %s", e)
            raise

    def write(self, data: bytes) -> None:
        logger.debug("Writing %d bytes.", len(data))
        self._write(data)

    def dispose(self) -> None:
        if getattr(self, "_disposed", False):
            return
        self._disposed = True
        try:
            self._dispose()
        except NotImplementedError:
            pass

    def __del__(self):
        self.dispose()

    def __enter__(self) -> "BaseBrotherQLBackend":
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()
