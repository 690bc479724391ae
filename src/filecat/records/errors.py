"""Record construction errors."""


class RecordError(Exception):
    """Base exception for file record construction."""


class UnrecognizedTypeError(RecordError):
    """Raised when a value cannot be mapped onto a known record type."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unrecognized file type: {value!r}")
        self.value = value
