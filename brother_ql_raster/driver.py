"""
This module drives a Brother QL-series label printer page by page.

The central piece of code in this module is the class
:py:class:`BrotherQLDriver`. It sequences the commands from
:py:mod:`brother_ql_raster.instructions` against a backend and follows the
printer's status frames until each page has been printed.
"""

import logging
import time
from io import BytesIO
from itertools import islice
from typing import Iterable, Iterator, Type

from .backends.abstract import BaseBrotherQLBackend
from .control.constants import STATUS_SIZE
from .control.interpret import classify_status, log_classification
from .control.outcome import PrintOutcome
from .control.print_info import PrintJobInfo
from .control.response import PrinterStatus, decode_status
from .control.status import JobStatus, PageStatus
from .exceptions import (
    BrotherQLError,
    BrotherQLInitError,
    BrotherQLPollTimeout,
    BrotherQLShortRead,
    BrotherQLUnknownModel,
    BrotherQLUnsupportedCmd,
)
from .instructions import (
    encode_autocut_enable,
    encode_autocut_interval,
    encode_extended_options,
    encode_init,
    encode_page_end,
    encode_page_start,
    encode_raster_end,
    encode_raster_line,
    encode_set_margins,
    encode_status_request,
)
from .models import Model, Models
from .pages import Page
from .settings import DriverSettings
from .utils.hex import hex_format

logger = logging.getLogger(__name__)


def fit_row(row: bytes | None, width: int) -> bytes:
    """Truncate or zero pad a pixel row to the raster buffer width."""
    row = bytes(row or b"")
    return row[:width].ljust(width, b"\x00")


def blank_line_split(line_count: int, min_lines: int) -> tuple[int, int]:
    """
    Blank lines to print before and after the content of a short page.

    The odd line of an uneven split goes after the content.
    """
    blanks = min_lines - line_count
    if blanks <= 0:
        return 0, 0
    return blanks // 2, blanks - blanks // 2


def _with_last(items: Iterable) -> Iterator[tuple[object, bool]]:
    iterator = iter(items)
    try:
        current = next(iterator)
    except StopIteration:
        return
    for following in iterator:
        yield current, False
        current = following
    yield current, True


class BrotherQLDriver:
    """
    Prints pages on a QL-series printer through a backend.

    :param backend: an open backend providing the device and its back-channel
    :param Model model: the printer profile (buffer width, minimum lines, ...)
    :param DriverSettings settings: retry bounds, delays and optional commands

    The driver keeps no state between jobs; a single instance must not be
    used by more than one thread at a time.
    """

    def __init__(self, backend: BaseBrotherQLBackend, model: Model = Models.QL570.value, settings: DriverSettings | None = None) -> None:
        self.backend = backend
        self.model = model
        self.settings = settings or DriverSettings()

    def _warn(self, problem: str, kind: Type[BrotherQLError] = BrotherQLUnsupportedCmd) -> None:
        """
        Logs the warning message `problem` or raises `kind`
        if `self.settings.strict` is set to True.
        """
        if self.settings.strict:
            raise kind(problem)
        else:
            logger.warning(problem)

    def write(self, data: bytes) -> None:
        self.backend.write(data)

    def read_status(self, attempt: int = 1) -> PrinterStatus | None:
        """
        Read one status frame from the back-channel.

        Returns None on a failed or short read. The print head mark is not
        checked here.
        """
        try:
            data = self.backend.read(STATUS_SIZE, self.settings.read_timeout)
        except OSError as e:
            logger.warning("Attempt %d: reading from the back-channel failed (%s), retrying.", attempt, e)
            return None
        try:
            return decode_status(data)
        except BrotherQLShortRead as e:
            logger.warning("Attempt %d: back-channel short read (%d of %d bytes), retrying.", attempt, len(e.data), e.expected)
            return None

    def request_status(self, attempt: int = 1) -> PrinterStatus | None:
        self.write(encode_status_request())
        return self.read_status(attempt)

    def drain_status(self) -> int:
        """
        Discard status frames that are already waiting on the back-channel.

        After a page completes the printer still reports its phase change back
        to waiting. Left unread, that frame would end polling for the next page
        before it has been printed. Returns the number of discarded reads.
        """
        discarded = 0
        for _ in range(self.settings.poll_attempts):
            try:
                data = self.backend.read(STATUS_SIZE, 0)
            except OSError as e:
                logger.debug("Draining the back-channel failed: %s", e)
                break
            if not data:
                break
            logger.debug("Discarding pending status data: %s", hex_format(data))
            discarded += 1
        return discarded

    def initialize(self) -> PrinterStatus:
        """
        Initialize the printer and wait for a sane status frame.

        Every attempt after the first one flushes the printer's input buffer
        first, in case an earlier job left a partial command behind.

        :raises BrotherQLInitError: if no valid status arrived within the allowed attempts
        """
        for attempt in range(1, self.settings.init_attempts + 1):
            self.write(encode_init(flush=attempt > 1))
            time.sleep(self.settings.settle_delay)

            status = self.request_status(attempt)
            if status is None:
                continue
            if not status.is_valid:
                logger.warning("Attempt %d: invalid print head mark 0x%02X, retrying.", attempt, status.print_head_mark)
                continue

            status.log_bytes()
            self._check_printer_id(status)
            return status

        raise BrotherQLInitError(f"Could not get status information after {self.settings.init_attempts} attempts.")

    def _check_printer_id(self, status: PrinterStatus) -> None:
        if status.printer_id == self.model.printer_id:
            return
        try:
            reported = Models.from_printer_id(status.printer_id).identifier
        except BrotherQLUnknownModel:
            reported = "an unknown model (0x{:02X})".format(status.printer_id)
        logger.warning("Configured for %s but the printer reports itself as %s.", self.model.identifier, reported)

    def _add_autocut(self, interval: int) -> None:
        if not self.model.cutting:
            self._warn("Trying to enable autocut on a printer that doesn't support it")
            return
        self.write(encode_autocut_enable() + encode_autocut_interval(interval))

    def _add_extended_options(self, page: Page) -> None:
        if not self.model.expanded_mode:
            self._warn("Trying to set expanded mode (dpi/cutting at end) on a printer that doesn't support it")
            return
        high_resolution = page.vertical_resolution == 2 * self.model.resolution
        logger.debug("Vertical resolution %d dpi, high resolution: %s", page.vertical_resolution, high_resolution)
        self.write(encode_extended_options(cut_at_end=True, high_resolution=high_resolution))

    def _raster_data(self, page: Page) -> bytes:
        width = self.model.buffer_width
        blank = encode_raster_line(width, b"\x00" * width)
        before, after = blank_line_split(page.line_count, self.model.min_lines)

        file_str = BytesIO()
        file_str.write(blank * before)
        rows_read = 0
        for row in islice(page.rows, page.line_count):
            file_str.write(encode_raster_line(width, fit_row(row, width)))
            rows_read += 1
        if rows_read < page.line_count:
            logger.warning("Page source ended after %d of %d lines, filling up with blank lines.", rows_read, page.line_count)
            file_str.write(blank * (page.line_count - rows_read))
        file_str.write(blank * after)
        file_str.write(encode_raster_end(width))
        logger.debug("Raster lines: %d blank, %d content, %d blank", before, page.line_count, after)
        return file_str.getvalue()

    def emit_page(self, page: Page, page_number: int = 0, last_page: bool = False) -> None:
        """
        Send a complete page to the printer without waiting for it to print.

        Pages shorter than the model's minimum line count are centered between
        blank lines, because the printer refuses anything shorter.
        """
        if page.line_count < 0:
            raise ValueError(f"Negative line count: {page.line_count}")

        info = PrintJobInfo(
            raster_number=max(page.line_count, self.model.min_lines),
            successive_page=page_number > 0,
        )
        # encode everything that can fail before the page is opened on the device
        margins = encode_set_margins(self.settings.margins) if self.settings.margins is not None else b""
        raster_data = self._raster_data(page)

        self.write(encode_page_start(info))
        if self.settings.autocut_interval is not None:
            self._add_autocut(self.settings.autocut_interval)
        self._add_extended_options(page)
        if margins:
            self.write(margins)

        self.write(raster_data)
        self.write(encode_page_end(last_page))

    def wait_for_page_end(self) -> PageStatus:
        """
        Follow the printer's status frames after a page has been submitted.

        Polling stops at the first terminal status (completed, error, or back
        to waiting) or after ``settings.poll_attempts`` reads. Short reads and
        frames with a wrong print head mark use up an attempt and are otherwise
        ignored.
        """
        status = PageStatus()

        # Give the printer a moment to return status data.
        time.sleep(self.settings.settle_delay)

        for attempt in range(1, self.settings.poll_attempts + 1):
            if attempt > 1:
                time.sleep(self.settings.poll_interval)
            status.attempts = attempt

            printer_status = self.read_status(attempt)
            if printer_status is None:
                continue
            if not printer_status.is_valid:
                logger.warning("Attempt %d: print status returned is invalid (print head mark 0x%02X), retrying.", attempt, printer_status.print_head_mark)
                continue

            status.printer_state = printer_status
            classification = classify_status(printer_status)
            log_classification(classification, logger)
            status.events.extend(event.message for event in classification.events)
            if classification.terminal:
                status.terminal = True
                status.outcome = classification.outcome
                status.errors = list(classification.errors)
                break

        status.log_status(logger)
        return status

    def print_page(self, page: Page, page_number: int = 0, last_page: bool = False) -> PageStatus:
        """
        Send a page and wait until the printer has dealt with it.

        Device errors are reported in the returned status, not raised.

        :raises BrotherQLPollTimeout: if no terminal status arrived and
            ``settings.raise_on_poll_timeout`` is set
        """
        self.emit_page(page, page_number, last_page)
        status = self.wait_for_page_end()
        if not status.terminal:
            status.outcome = PrintOutcome.SENT
            if self.settings.raise_on_poll_timeout:
                raise BrotherQLPollTimeout(f"No terminal status after {status.attempts} status reads for page {page_number + 1}.")
        return status

    def print_job(self, pages: Iterable[Page]) -> JobStatus:
        """
        Initialize the printer and print all pages.

        The job stops after the first page the printer reports an error for.
        """
        job = JobStatus(initial_state=self.initialize())
        for page_number, (page, last_page) in enumerate(_with_last(pages)):
            if page_number > 0:
                self.drain_status()
            page_status = self.print_page(page, page_number, last_page)
            job.pages.append(page_status)
            logger.info("PAGE: %d #-pages", page_number + 1)
            if page_status.outcome == PrintOutcome.ERROR:
                logger.error("Stopping the job after page %d.", page_number + 1)
                break
        return job

    def send(self, instructions: bytes, blocking: bool = True) -> PageStatus:
        """
        Send ready-made instruction bytes to a printer.

        :param bytes instructions: The instructions to be sent to the printer.
        :param bool blocking: Indicates whether the function call should block while waiting for the completion of the printing.
        """
        logger.info("Sending instructions to the printer. Total: %d bytes.", len(instructions))
        self.write(instructions)
        if not blocking:
            return PageStatus(outcome=PrintOutcome.SENT)

        status = self.wait_for_page_end()
        if not status.terminal:
            status.outcome = PrintOutcome.SENT
        return status
