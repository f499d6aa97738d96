class BrotherQLError(Exception):
    pass


class BrotherQLUnsupportedCmd(BrotherQLError):
    pass


class BrotherQLUnknownModel(BrotherQLError):
    pass


class BrotherQLRasterError(BrotherQLError):
    pass


class BrotherQLShortRead(BrotherQLError):
    """Fewer bytes than a full status frame were received."""

    def __init__(self, data: bytes, expected: int = 32) -> None:
        self.data = bytes(data)
        self.expected = expected
        super().__init__(f"Short read: got {len(self.data)} of {expected} bytes")


class BrotherQLInitError(BrotherQLError):
    pass


class BrotherQLPollTimeout(BrotherQLError):
    pass
