import io
import logging
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator

from PIL import Image

from .control.constants import ExtendedOption
from .control.op_codes import OpCode, instruction_length, match_opcode
from .utils.hex import hex_format

logger = logging.getLogger(__name__)


def chunker(data: bytes, raise_exception: bool = False) -> Iterator[tuple[OpCode, bytes]]:
    """
    Breaks data stream (bytes) into single instructions.

    Logs warnings for unknown opcodes or raises an exception instead, if raise_exception is set to True.

    yields: (opcode, instruction bytes) tuples
    """
    data = bytes(data)
    while data:
        try:
            opcode = match_opcode(data)
            num_bytes = instruction_length(opcode, data)
        except (ValueError, IndexError):
            msg = "unknown opcode starting with {}...".format(hex_format(data[0:4]))
            if raise_exception:
                raise ValueError(msg)
            logger.warning(msg)
            data = data[1:]
            continue

        if num_bytes > len(data):
            msg = "truncated {} instruction: {} of {} bytes".format(opcode.name, len(data), num_bytes)
            if raise_exception:
                raise ValueError(msg)
            logger.warning(msg)

        yield opcode, data[:num_bytes]
        data = data[num_bytes:]


@dataclass
class AnalysedPage:
    rows: list[bytes] = field(default_factory=list)
    raster_number: int | None = None
    successive_page: bool = False
    cut_at_end: bool = False
    high_resolution: bool = False
    last_page: bool = False

    def to_image(self) -> Image.Image | None:
        """Render the page black on white, as it comes out of the printer."""
        if not self.rows:
            return None
        width_dots = max(len(row) for row in self.rows)
        size = (width_dots * 8, len(self.rows))
        data = b"".join(row.ljust(width_dots, b"\x00") for row in self.rows)
        data = bytes(0xFF ^ byte for byte in data)  # invert b/w
        im = Image.frombytes("1", size, data, decoder_name="raw")
        return im.transpose(Image.Transpose.FLIP_LEFT_RIGHT)


class BrotherQLReader:
    DEFAULT_FILENAME_FMT = "label{counter:04d}.png"

    def __init__(self, brother_file: str | BinaryIO) -> None:
        if isinstance(brother_file, str):
            brother_file = io.open(brother_file, "rb")
        self.brother_file = brother_file
        self.filename_fmt = self.DEFAULT_FILENAME_FMT
        self.cut_at_end = False
        self.high_resolution_printing = False

    def analyse(self) -> list[AnalysedPage]:
        instructions = self.brother_file.read()
        pages = []
        page = AnalysedPage()
        for opcode, instruction in chunker(instructions):
            if len(instruction) < instruction_length(opcode, instruction):
                logger.warning("Skipping truncated %s instruction at the end of the data.", opcode.name)
                continue
            payload = instruction[len(opcode.signature) :]
            if opcode.name not in ("preamble", "raster"):
                logger.info(" {} ({}) --> found! (payload: {})".format(opcode.name, hex_format(opcode.signature), hex_format(payload)))
            match opcode.name:
                case "init":
                    page = AnalysedPage()
                case "media/quality":
                    page.raster_number = struct.unpack("<L", payload[4:8])[0]
                    page.successive_page = bool(payload[8])
                    logger.info(" raster no: %d rows", page.raster_number)
                case "expanded":
                    self.cut_at_end = bool(payload[0] & ExtendedOption.CUT_AT_END)
                    self.high_resolution_printing = bool(payload[0] & ExtendedOption.HIGH_RESOLUTION)
                case "raster":
                    page.rows.append(bytes(payload[1:]))
                case "print":
                    page.cut_at_end = self.cut_at_end
                    page.high_resolution = self.high_resolution_printing
                    page.last_page = instruction == b"\x1A"
                    logger.info("Len of rows: %d", len(page.rows))
                    if page.raster_number is not None and page.raster_number != len(page.rows):
                        logger.warning("Page announced %d rows but contains %d.", page.raster_number, len(page.rows))
                    pages.append(page)
                    page = AnalysedPage()
        return pages

    def save_pages(self, pages: list[AnalysedPage]) -> list[str]:
        filenames = []
        for counter, page in enumerate(pages, start=1):
            im = page.to_image()
            if im is None:
                logger.warning("Page %d has no raster data, not saved.", counter)
                continue
            img_name = self.filename_fmt.format(counter=counter)
            im.save(img_name)
            logger.info("Page saved as %s", img_name)
            filenames.append(img_name)
        return filenames
