from enum import IntEnum, IntFlag

PRINT_HEAD_MARK = 0x80
STATUS_SIZE = 32


class PrinterType(IntEnum):
    OTHER = 0x00
    QL_500_550 = 0x4F
    QL_560 = 0x31
    QL_570 = 0x32
    QL_580N = 0x33
    QL_650TD = 0x51
    QL_700 = 0x35
    QL_1050 = 0x50
    QL_1060N = 0x34


class RespMediaTypes(IntEnum):
    NO_MEDIA = 0x00
    CONTINUOUS_LENGTH_TAPE = 0x0A
    DIE_CUT_LABELS = 0x0B


class RespStatusTypes(IntEnum):
    REPLY_TO_STATUS_REQUEST = 0x00
    PRINTING_COMPLETED = 0x01
    ERROR_OCCURRED = 0x02
    NOTIFICATION = 0x05
    PHASE_CHANGE = 0x06


class RespPhaseTypes(IntEnum):
    WAITING_TO_RECEIVE = 0x00
    PRINTING_STATE = 0x01


class RespNotificationTypes(IntEnum):
    NOT_AVAILABLE = 0x00
    COOLING_STARTED = 0x03
    COOLING_FINISHED = 0x04


class ExtendedOption(IntFlag):
    # The vendor diagram puts cut-at-end on bit 4; the printer honours bit 3.
    CUT_AT_END = 0x08
    # Doubles the resolution along the label length only.
    HIGH_RESOLUTION = 0x40


class PrintInfoValidity(IntFlag):
    MEDIA_TYPE = 0x02
    MEDIA_WIDTH = 0x04
    MEDIA_LENGTH = 0x08
    QUALITY = 0x40
    # Documented as "always on"; it does not make the printer recover from errors.
    RECOVER = 0x80


RESP_BYTE_NAMES = [
    "Print head mark",
    "Size",
    "Fixed (B=0x42)",
    "Device dependent",
    "Printer ID",
    "Fixed (0=0x30)",
    "Fixed (0x00 or 0=0x30)",
    "Fixed (0x00)",
    "Error information 1",
    "Error information 2",
    "Media width",
    "Media type",
    "Fixed (0x00)",
    "Fixed (0x00)",
    "Reserved",
    "Mode",
    "Fixed (0x00)",
    "Media length",
    "Status type",
    "Phase type",
    "Phase number (high)",
    "Phase number (low)",
    "Notification number",
    "Reserved",
    "Reserved",
]
