import pytest

from brother_ql_raster.control.constants import PrinterType, RespMediaTypes, RespStatusTypes
from brother_ql_raster.control.errors import RespErrorInformation1, RespErrorInformation2
from brother_ql_raster.control.response import PrinterStatus, decode_status
from brother_ql_raster.exceptions import BrotherQLShortRead

# A reply to a status request from a QL-570 with 62 mm endless tape loaded.
QL570_REPLY = bytes.fromhex("80 20 42 30 32 30 00 00 00 00 3e 0a 00 00 15 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00")


def test_decode_maps_fields_positionally() -> None:
    status = decode_status(QL570_REPLY)
    assert status.print_head_mark == 0x80
    assert status.size == 32
    assert status.printer_id == 0x32
    assert status.printer_type == PrinterType.QL_570
    assert status.media_width == 62
    assert status.media == RespMediaTypes.CONTINUOUS_LENGTH_TAPE
    assert status.status == RespStatusTypes.REPLY_TO_STATUS_REQUEST
    assert status.reserved_14 == 0x15
    assert status.is_valid


def test_decode_round_trips_reserved_bytes() -> None:
    raw = bytes(range(0x80, 0x80 + 32))
    assert decode_status(raw).to_bytes() == raw


def test_encode_then_decode_gives_identical_record() -> None:
    status = PrinterStatus(printer_id=0x35, error_info_1=0x81, status_type=2, phase_num_l=7, reserved_tail=b"12345678")
    assert decode_status(status.to_bytes()) == status


@pytest.mark.parametrize("length", [0, 1, 20, 31])
def test_short_read(length: int) -> None:
    with pytest.raises(BrotherQLShortRead) as excinfo:
        decode_status(QL570_REPLY[:length])
    assert len(excinfo.value.data) == length
    assert excinfo.value.expected == 32


def test_decode_does_not_validate_print_head_mark() -> None:
    status = decode_status(b"\x00" * 32)
    assert not status.is_valid


def test_unknown_enum_values_are_kept_raw() -> None:
    status = PrinterStatus(status_type=0x42, media_type=0x99, printer_id=0x77)
    assert status.status == 0x42
    assert status.media == 0x99
    assert status.printer_type == 0x77


def test_error_bits_are_not_exclusive() -> None:
    status = PrinterStatus(error_info_1=0x81, error_info_2=0x14)
    assert status.errors_1 == [RespErrorInformation1.NO_MEDIA, RespErrorInformation1.FAN_MALFUNCTION]
    assert status.errors_2 == [RespErrorInformation2.TRANSMISSION_ERROR, RespErrorInformation2.COVER_OPENED]


def test_phase_number() -> None:
    assert PrinterStatus(phase_num_h=0x01, phase_num_l=0x02).phase_number == 0x0102
