"""
Encoders for the raster command language of the Brother QL label printers.

Every function returns the bytes of exactly one command (or one command
preceded by the invalidate preamble) and performs no I/O.
"""

import struct

from .control.constants import ExtendedOption, RespMediaTypes
from .control.print_info import PrintJobInfo
from .exceptions import BrotherQLRasterError

ESC = b"\x1B"
RASTER_OPCODE = 0x67
INVALIDATE_LENGTH = 200
DEFAULT_CONTINUOUS_MARGINS = 35


def encode_init(flush: bool = False) -> bytes:
    """
    Initialize the printer.

    With ``flush`` the command is preceded by 200 bytes of 0x00, which clears a
    partially received command still sitting in the printer's input buffer.
    """
    data = b"\x00" * INVALIDATE_LENGTH if flush else b""
    return data + ESC + b"\x40"  # ESC @


def encode_status_request() -> bytes:
    return ESC + b"\x69\x53"  # ESC i S


def _check_length(length: int) -> None:
    if not 0 <= length <= 0xFF:
        raise BrotherQLRasterError(f"Raster line length must fit in one byte, got {length}")


def encode_raster_line(length: int, data: bytes) -> bytes:
    _check_length(length)
    if len(data) != length:
        raise BrotherQLRasterError(f"Raster data is {len(data)} bytes long, expected {length}")
    return bytes([RASTER_OPCODE, 0x00, length]) + bytes(data)


def encode_raster_end(length: int) -> bytes:
    """Same shape as a raster line, 0xFF in the second header byte marks the end of the data."""
    _check_length(length)
    return bytes([RASTER_OPCODE, 0xFF, length]) + b"\x00" * length


def encode_page_start(info: PrintJobInfo) -> bytes:
    return ESC + b"\x69\x7A" + info.to_bytes()  # ESC i z


def encode_page_end(last_page: bool = True) -> bytes:
    if last_page:
        return b"\x1A"  # 0x1A = ^Z = SUB; here: EOF = End of File
    return b"\x0C"  # 0x0C = FF  = Form Feed


def encode_extended_options(cut_at_end: bool = False, high_resolution: bool = False) -> bytes:
    """
    Expanded mode.

    High resolution doubles the resolution along the label length only (300x600
    dpi), which also halves the shortest possible label.
    """
    options = ExtendedOption(0)
    if cut_at_end:
        options |= ExtendedOption.CUT_AT_END
    if high_resolution:
        options |= ExtendedOption.HIGH_RESOLUTION
    return ESC + b"\x69\x4B" + bytes([options])  # ESC i K


def encode_autocut_enable() -> bytes:
    return ESC + b"\x69\x4D" + bytes([1 << 6])  # ESC i M


def encode_autocut_interval(n: int = 1) -> bytes:
    if not 1 <= n <= 0xFF:
        raise BrotherQLRasterError(f"Autocut interval must be between 1 and 255, got {n}")
    return ESC + b"\x69\x41" + bytes([n])  # ESC i A


def encode_set_margins(lines: int) -> bytes:
    """Blank lines the printer feeds before and after the label on continuous tape."""
    if not 0 <= lines <= 0xFFFF:
        raise BrotherQLRasterError(f"Margins must fit in two bytes, got {lines}")
    return ESC + b"\x69\x64" + struct.pack("<H", lines)  # ESC i d


def encode_default_margins(media_type: int) -> bytes:
    if media_type == RespMediaTypes.CONTINUOUS_LENGTH_TAPE:
        return encode_set_margins(DEFAULT_CONTINUOUS_MARGINS)
    return encode_set_margins(0)
