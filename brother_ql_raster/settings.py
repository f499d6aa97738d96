from dataclasses import dataclass


@dataclass(frozen=True)
class DriverSettings:
    # Initialization attempts before giving up on the printer.
    init_attempts: int = 10
    # Status reads while waiting for the end of a page.
    poll_attempts: int = 25
    # Seconds between two status reads.
    poll_interval: float = 0.1
    # Seconds to give the printer after init and after ending a page.
    settle_delay: float = 0.1
    # Seconds a single back-channel read may block.
    read_timeout: float = 10.0
    # Raise BrotherQLPollTimeout when a page never reaches a terminal status.
    raise_on_poll_timeout: bool = True
    # Cut every n-th page; None leaves the printer's auto cut setting alone.
    autocut_interval: int | None = None
    # Blank lines fed by the printer around the label; None sends no margins command.
    margins: int | None = None
    # Raise instead of warn when a command is not supported by the model.
    strict: bool = False

    def __post_init__(self) -> None:
        if self.init_attempts < 1 or self.poll_attempts < 1:
            raise ValueError("init_attempts and poll_attempts must be at least 1")
        if min(self.poll_interval, self.settle_delay, self.read_timeout) < 0:
            raise ValueError("delays and timeouts must not be negative")
        if self.autocut_interval is not None and not 1 <= self.autocut_interval <= 0xFF:
            raise ValueError(f"autocut_interval must be between 1 and 255, got {self.autocut_interval}")
        if self.margins is not None and not 0 <= self.margins <= 0xFFFF:
            raise ValueError(f"margins must be between 0 and 65535, got {self.margins}")
