import logging

from brother_ql_raster.control.constants import RespNotificationTypes, RespPhaseTypes, RespStatusTypes
from brother_ql_raster.control.errors import RespErrorInformation1, RespErrorInformation2
from brother_ql_raster.control.interpret import classify_status, log_classification
from brother_ql_raster.control.outcome import PrintOutcome
from brother_ql_raster.control.response import PrinterStatus


def test_completed_is_terminal_success() -> None:
    result = classify_status(PrinterStatus(status_type=RespStatusTypes.PRINTING_COMPLETED))
    assert result.terminal
    assert result.outcome == PrintOutcome.PRINTED
    assert [event.message for event in result.events] == ["Page completed."]


def test_error_reports_every_set_bit() -> None:
    status = PrinterStatus(
        status_type=RespStatusTypes.ERROR_OCCURRED,
        error_info_1=RespErrorInformation1.NO_MEDIA | RespErrorInformation1.FAN_MALFUNCTION,
        error_info_2=RespErrorInformation2.COVER_OPENED,
    )
    result = classify_status(status)
    assert result.terminal
    assert result.outcome == PrintOutcome.ERROR
    assert result.errors == ("No media.", "Fan malfunction.", "Cover opened.")
    assert all(event.level == logging.ERROR for event in result.events)


def test_error_without_bits_is_still_terminal() -> None:
    result = classify_status(PrinterStatus(status_type=RespStatusTypes.ERROR_OCCURRED))
    assert result.terminal
    assert result.errors == ()


def test_notifications_do_not_stop_polling() -> None:
    started = classify_status(PrinterStatus(status_type=RespStatusTypes.NOTIFICATION, notification_type=RespNotificationTypes.COOLING_STARTED))
    finished = classify_status(PrinterStatus(status_type=RespStatusTypes.NOTIFICATION, notification_type=RespNotificationTypes.COOLING_FINISHED))
    assert not started.terminal and not finished.terminal
    assert started.events[0].message == "Cooling started."
    assert finished.events[0].message == "Cooling finished."


def test_phase_change_waiting_is_terminal() -> None:
    result = classify_status(PrinterStatus(status_type=RespStatusTypes.PHASE_CHANGE, phase_type=RespPhaseTypes.WAITING_TO_RECEIVE))
    assert result.terminal
    assert result.outcome == PrintOutcome.READY


def test_phase_change_printing_continues() -> None:
    result = classify_status(PrinterStatus(status_type=RespStatusTypes.PHASE_CHANGE, phase_type=RespPhaseTypes.PRINTING_STATE))
    assert not result.terminal
    assert result.events[0].message == "Printing..."


def test_reply_and_unknown_types_have_no_events() -> None:
    for status_type in (RespStatusTypes.REPLY_TO_STATUS_REQUEST, 0x42):
        result = classify_status(PrinterStatus(status_type=status_type))
        assert not result.terminal
        assert result.events == ()


def test_log_classification(caplog) -> None:
    result = classify_status(PrinterStatus(status_type=RespStatusTypes.ERROR_OCCURRED, error_info_2=RespErrorInformation2.WRONG_MEDIA))
    with caplog.at_level(logging.INFO):
        log_classification(result, logging.getLogger("test"))
    assert "Wrong media." in caplog.text
