import logging
import struct
from dataclasses import astuple, dataclass

from .constants import (
    PRINT_HEAD_MARK,
    RESP_BYTE_NAMES,
    STATUS_SIZE,
    PrinterType,
    RespMediaTypes,
    RespNotificationTypes,
    RespPhaseTypes,
    RespStatusTypes,
)
from .errors import RespErrorInformation1, RespErrorInformation2
from ..exceptions import BrotherQLShortRead
from ..utils.hex import hex_format

logger = logging.getLogger(__name__)

# 24 single byte fields followed by an 8 byte reserved tail.
STATUS_STRUCT = struct.Struct("<24B8s")


def _enum_or_raw(enum_type, value: int):
    try:
        return enum_type(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class PrinterStatus:
    """
    A 32 byte status frame as returned by the printer.

    All fields hold the raw byte values so that a decoded frame encodes back
    to exactly the same bytes. The enum views (:py:attr:`status`,
    :py:attr:`phase`, ...) fall back to the raw integer for values the
    protocol does not define.
    """

    print_head_mark: int = PRINT_HEAD_MARK
    size: int = STATUS_SIZE
    reserved_2: int = 0x42
    reserved_3: int = 0
    printer_id: int = 0
    reserved_5: int = 0x30
    reserved_6: int = 0
    reserved_7: int = 0
    error_info_1: int = 0
    error_info_2: int = 0
    media_width: int = 0
    media_type: int = 0
    reserved_12: int = 0
    reserved_13: int = 0
    reserved_14: int = 0
    reserved_15: int = 0
    reserved_16: int = 0
    media_length: int = 0
    status_type: int = 0
    phase_type: int = 0
    phase_num_h: int = 0
    phase_num_l: int = 0
    notification_type: int = 0
    reserved_23: int = 0
    reserved_tail: bytes = b"\x00" * 8

    @staticmethod
    def from_bytes(data: bytes) -> "PrinterStatus":
        data = bytes(data)
        if len(data) < STATUS_SIZE:
            raise BrotherQLShortRead(data, STATUS_SIZE)
        return PrinterStatus(*STATUS_STRUCT.unpack(data[:STATUS_SIZE]))

    def to_bytes(self) -> bytes:
        return STATUS_STRUCT.pack(*astuple(self))

    @property
    def is_valid(self) -> bool:
        return self.print_head_mark == PRINT_HEAD_MARK

    @property
    def status(self) -> RespStatusTypes | int:
        return _enum_or_raw(RespStatusTypes, self.status_type)

    @property
    def phase(self) -> RespPhaseTypes | int:
        return _enum_or_raw(RespPhaseTypes, self.phase_type)

    @property
    def notification(self) -> RespNotificationTypes | int:
        return _enum_or_raw(RespNotificationTypes, self.notification_type)

    @property
    def media(self) -> RespMediaTypes | int:
        return _enum_or_raw(RespMediaTypes, self.media_type)

    @property
    def printer_type(self) -> PrinterType | int:
        return _enum_or_raw(PrinterType, self.printer_id)

    @property
    def phase_number(self) -> int:
        return (self.phase_num_h << 8) | self.phase_num_l

    @property
    def errors_1(self) -> list[RespErrorInformation1]:
        return RespErrorInformation1.present_in(self.error_info_1)

    @property
    def errors_2(self) -> list[RespErrorInformation2]:
        return RespErrorInformation2.present_in(self.error_info_2)

    def log_bytes(self, level: int = logging.DEBUG) -> None:
        raw = self.to_bytes()
        for i, byte_name in enumerate(RESP_BYTE_NAMES):
            logger.log(level, "Byte %2d %24s %02X", i, byte_name + ":", raw[i])
        logger.log(level, "Bytes 25-31 %20s %s", "Reserved:", hex_format(raw[len(RESP_BYTE_NAMES) :]))


def decode_status(data: bytes) -> PrinterStatus:
    """
    Map a status frame positionally onto a :py:class:`PrinterStatus`.

    The print head mark is not checked here, use :py:attr:`PrinterStatus.is_valid`.

    :raises BrotherQLShortRead: if fewer than 32 bytes are supplied
    """
    return PrinterStatus.from_bytes(data)
