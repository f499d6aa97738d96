from dataclasses import dataclass, field
from logging import Logger

from .outcome import PrintOutcome
from .response import PrinterStatus


@dataclass
class PageStatus:
    outcome: PrintOutcome = PrintOutcome.UNKNOWN
    printer_state: PrinterStatus | None = None  # The last valid status read back from the printer.
    terminal: bool = False  # True if polling ended on a terminal status rather than by running out of attempts.
    events: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    attempts: int = 0  # Number of poll attempts used.

    @property
    def did_print(self) -> bool:
        return self.outcome in (PrintOutcome.PRINTED, PrintOutcome.READY)

    def log_status(self, logger: Logger) -> None:
        if self.outcome == PrintOutcome.ERROR:
            logger.error("Printing failed: %s", ", ".join(self.errors) or "unknown error")
        elif not self.terminal:
            logger.warning("No terminal status received after %d attempts.", self.attempts)
            logger.warning("Printing potentially not successful?")
        else:
            logger.info("Printing was successful. Waiting for the next page.")


@dataclass
class JobStatus:
    pages: list[PageStatus] = field(default_factory=list)
    initial_state: PrinterStatus | None = None

    @property
    def outcome(self) -> PrintOutcome:
        if not self.pages:
            return PrintOutcome.UNKNOWN
        if any(page.outcome == PrintOutcome.ERROR for page in self.pages):
            return PrintOutcome.ERROR
        return self.pages[-1].outcome

    @property
    def errors(self) -> list[str]:
        return [error for page in self.pages for error in page.errors]
