from enum import IntFlag


class RespErrorInformation1(IntFlag):
    NO_MEDIA = 0x01
    END_OF_MEDIA = 0x02  # DieCut size only
    TAPE_CUTTER_JAM = 0x04
    MAIN_UNIT_IN_USE = 0x10  # QL-560/650TD/1050
    PRINTER_TURNED_OFF = 0x20
    HIGH_VOLTAGE_ADAPTER = 0x40  # NOT USED
    FAN_MALFUNCTION = 0x80  # QL-1050/1060N

    @property
    def description(self) -> str:
        return ERROR_1_DESCRIPTIONS[self]

    @classmethod
    def present_in(cls, error_info: int) -> list["RespErrorInformation1"]:
        return [error for error in ERROR_1_DESCRIPTIONS if error_info & error]


class RespErrorInformation2(IntFlag):
    # Bit 0 is "not used" in the status table, but the printer sets it when
    # the media requested in the print information does not match.
    WRONG_MEDIA = 0x01
    EXPANSION_BUFFER_FULL = 0x02
    TRANSMISSION_ERROR = 0x04
    COMMUNICATION_BUFFER_FULL = 0x08  # NOT USED
    COVER_OPENED = 0x10  # Except QL-500
    CANCEL_KEY = 0x20  # NOT USED
    CANNOT_FEED = 0x40  # Also when the media end is detected
    SYSTEM_ERROR = 0x80

    @property
    def description(self) -> str:
        return ERROR_2_DESCRIPTIONS[self]

    @classmethod
    def present_in(cls, error_info: int) -> list["RespErrorInformation2"]:
        return [error for error in ERROR_2_DESCRIPTIONS if error_info & error]


ERROR_1_DESCRIPTIONS = {
    RespErrorInformation1.NO_MEDIA: "No media.",
    RespErrorInformation1.END_OF_MEDIA: "End of media.",
    RespErrorInformation1.TAPE_CUTTER_JAM: "Tape cutter jam.",
    RespErrorInformation1.MAIN_UNIT_IN_USE: "Main unit in use.",
    RespErrorInformation1.PRINTER_TURNED_OFF: "Printer turned off.",
    RespErrorInformation1.HIGH_VOLTAGE_ADAPTER: "High-voltage adapter.",
    RespErrorInformation1.FAN_MALFUNCTION: "Fan malfunction.",
}

ERROR_2_DESCRIPTIONS = {
    RespErrorInformation2.WRONG_MEDIA: "Wrong media.",
    RespErrorInformation2.EXPANSION_BUFFER_FULL: "Expansion buffer full.",
    RespErrorInformation2.TRANSMISSION_ERROR: "Transmission error.",
    RespErrorInformation2.COMMUNICATION_BUFFER_FULL: "Communication buffer full.",
    RespErrorInformation2.COVER_OPENED: "Cover opened.",
    RespErrorInformation2.CANCEL_KEY: "Cancel key.",
    RespErrorInformation2.CANNOT_FEED: "Cannot feed.",
    RespErrorInformation2.SYSTEM_ERROR: "System error.",
}
