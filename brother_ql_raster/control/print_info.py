import struct
from dataclasses import dataclass

from .constants import PrintInfoValidity

PRINT_INFO_STRUCT = struct.Struct("<BBBBLBB")


@dataclass(frozen=True)
class PrintJobInfo:
    """
    Print information sent with ``ESC i z`` at the start of every page.

    Media constraints left as ``None`` are not checked by the printer. When
    given, the printer stops with ``WRONG_MEDIA`` if the loaded media differs.
    """

    raster_number: int
    media_type: int | None = None
    media_width: int | None = None
    media_length: int | None = None
    successive_page: bool = False
    quality: bool = True
    recover: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.raster_number <= 0xFFFFFFFF:
            raise ValueError(f"raster_number out of range: {self.raster_number}")

    @property
    def valid_flag(self) -> PrintInfoValidity:
        flags = PrintInfoValidity(0)
        if self.media_type is not None:
            flags |= PrintInfoValidity.MEDIA_TYPE
        if self.media_width is not None:
            flags |= PrintInfoValidity.MEDIA_WIDTH
        if self.media_length is not None:
            flags |= PrintInfoValidity.MEDIA_LENGTH
        if self.quality:
            flags |= PrintInfoValidity.QUALITY
        if self.recover:
            flags |= PrintInfoValidity.RECOVER
        return flags

    def to_bytes(self) -> bytes:
        vals = [self.media_type, self.media_width, self.media_length]
        return PRINT_INFO_STRUCT.pack(
            int(self.valid_flag),
            *(0 if val is None else val & 0xFF for val in vals),
            self.raster_number,
            1 if self.successive_page else 0,
            0x00,
        )
