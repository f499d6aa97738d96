from dataclasses import dataclass
from enum import Enum

from .control.constants import PrinterType
from .exceptions import BrotherQLUnknownModel


@dataclass(frozen=True)
class Model:
    """
    This class represents a printer model. All constants that differ between
    printers speaking the same raster language live here, so the driver
    never has to hardcode them.
    """

    # A string identifier given to each model implemented. Eg. 'QL-570'.
    identifier: str
    # The printer id reported in byte 4 of the status frame.
    printer_id: int
    # Minimum and maximum number of rows or 'dots' that can be printed.
    # Printing fewer rows than the minimum leaves the printer blinking
    # its red LED, so pages are padded up to it.
    min_max_length_dots: tuple[int, int]
    # Raster line length in bytes; 90 bytes are 720 monochrome pixels.
    number_bytes_per_row: int = 90
    # Base resolution along the label length in dpi.
    resolution: int = 300
    # Support for the 'expanded mode' opcode (cut at end, 300x600 dpi).
    expanded_mode: bool = True
    # Model has a cutting blade to automatically cut labels
    cutting: bool = True

    @property
    def name(self) -> str:
        return self.identifier

    @property
    def min_lines(self) -> int:
        return self.min_max_length_dots[0]

    @property
    def buffer_width(self) -> int:
        return self.number_bytes_per_row

    @property
    def supports_high_res(self) -> bool:
        return self.expanded_mode

    @property
    def pixel_width(self) -> int:
        return self.number_bytes_per_row * 8


class Models(Enum):
    QL500 = Model("QL-500", PrinterType.QL_500_550, (295, 11811), expanded_mode=False, cutting=False)
    QL550 = Model("QL-550", PrinterType.QL_500_550, (295, 11811))
    QL560 = Model("QL-560", PrinterType.QL_560, (295, 11811))
    QL570 = Model("QL-570", PrinterType.QL_570, (150, 11811))
    QL580N = Model("QL-580N", PrinterType.QL_580N, (150, 11811))
    QL650TD = Model("QL-650TD", PrinterType.QL_650TD, (295, 11811))
    QL700 = Model("QL-700", PrinterType.QL_700, (150, 11811))
    QL1050 = Model("QL-1050", PrinterType.QL_1050, (295, 35433), number_bytes_per_row=162)
    QL1060N = Model("QL-1060N", PrinterType.QL_1060N, (295, 35433), number_bytes_per_row=162)

    @staticmethod
    def from_identifier(identifier: str) -> Model:
        try:
            return Models[identifier.upper().replace("-", "")].value
        except KeyError:
            raise BrotherQLUnknownModel(f"Model '{identifier}' not implemented.")

    @staticmethod
    def from_printer_id(printer_id: int) -> Model:
        """The QL-500 and QL-550 share an id; the first match is returned."""
        for model in Models:
            if model.value.printer_id == printer_id:
                return model.value
        raise BrotherQLUnknownModel(f"Unknown printer id 0x{printer_id:02X}.")

    @staticmethod
    def identifiers() -> list[str]:
        return [model.value.identifier for model in Models]
