"""
Turns a valid printer status into user visible information.

:py:func:`classify_status` is free of side effects; logging the result is left
to :py:func:`log_classification`.
"""

import logging
from dataclasses import dataclass, field
from logging import Logger

from .constants import RespNotificationTypes, RespPhaseTypes, RespStatusTypes
from .outcome import PrintOutcome
from .response import PrinterStatus


@dataclass(frozen=True)
class StatusEvent:
    level: int
    message: str


@dataclass(frozen=True)
class StatusClassification:
    # True when polling for the end of the page can stop.
    terminal: bool
    outcome: PrintOutcome = PrintOutcome.UNKNOWN
    events: tuple[StatusEvent, ...] = field(default_factory=tuple)
    errors: tuple[str, ...] = field(default_factory=tuple)


NOT_TERMINAL = StatusClassification(terminal=False)


def _classify_error(status: PrinterStatus) -> StatusClassification:
    # Several error conditions can be present at the same time.
    errors = [error.description for error in status.errors_1]
    errors += [error.description for error in status.errors_2]
    return StatusClassification(
        terminal=True,
        outcome=PrintOutcome.ERROR,
        events=tuple(StatusEvent(logging.ERROR, error) for error in errors),
        errors=tuple(errors),
    )


def _classify_notification(status: PrinterStatus) -> StatusClassification:
    match status.notification:
        case RespNotificationTypes.COOLING_STARTED:
            return StatusClassification(terminal=False, events=(StatusEvent(logging.INFO, "Cooling started."),))
        case RespNotificationTypes.COOLING_FINISHED:
            return StatusClassification(terminal=False, events=(StatusEvent(logging.INFO, "Cooling finished."),))
    return NOT_TERMINAL


def _classify_phase_change(status: PrinterStatus) -> StatusClassification:
    match status.phase:
        case RespPhaseTypes.WAITING_TO_RECEIVE:
            return StatusClassification(terminal=True, outcome=PrintOutcome.READY, events=(StatusEvent(logging.INFO, "Ready."),))
        case RespPhaseTypes.PRINTING_STATE:
            return StatusClassification(terminal=False, events=(StatusEvent(logging.INFO, "Printing..."),))
    return NOT_TERMINAL


def classify_status(status: PrinterStatus) -> StatusClassification:
    """
    Classify a status whose print head mark has already been checked.

    Completion, errors and the printer going back to waiting end the polling;
    replies, notifications and the printing phase do not.
    """
    match status.status:
        case RespStatusTypes.PRINTING_COMPLETED:
            return StatusClassification(terminal=True, outcome=PrintOutcome.PRINTED, events=(StatusEvent(logging.INFO, "Page completed."),))
        case RespStatusTypes.ERROR_OCCURRED:
            return _classify_error(status)
        case RespStatusTypes.NOTIFICATION:
            return _classify_notification(status)
        case RespStatusTypes.PHASE_CHANGE:
            return _classify_phase_change(status)
    return NOT_TERMINAL


def log_classification(classification: StatusClassification, logger: Logger) -> None:
    for event in classification.events:
        logger.log(event.level, event.message)
