# Defines the standardized, internal data structures and errors for the application.

from dataclasses import dataclass

# Values written for a row whose distance could not be determined.
UNKNOWN_DISTANCE_KM = 0.0
UNKNOWN_DURATION = "N/A"


@dataclass(frozen=True)
class Row:
    """One route read from the input file."""
    site_code: str
    site_name: str
    terminal_code: str
    origin: str
    destination: str


@dataclass(frozen=True)
class LookupResult:
    """A standardized representation of a route's driving distance and time."""
    distance_km: float
    duration: str

    @classmethod
    def unavailable(cls) -> "LookupResult":
        return cls(distance_km=UNKNOWN_DISTANCE_KM, duration=UNKNOWN_DURATION)


# --- Errors ---

class RouteBatchError(Exception):
    """Base class for every error raised by this application."""


class SetupError(RouteBatchError):
    """The run cannot start: missing credential or unreadable input file."""


class MalformedInput(RouteBatchError):
    """The input file does not have the expected shape."""

    def __init__(self, message: str, line: int | None = None, row: int | None = None):
        super().__init__(message)
        self.line = line
        self.row = row


class LookupFailure(RouteBatchError):
    """A single distance lookup failed. The batch records a sentinel and moves on."""


class NetworkError(LookupFailure):
    pass


class DecodeError(LookupFailure):
    pass


class APIError(LookupFailure):
    def __init__(self, status: str, error_message: str | None = None):
        message = f"API error: {status}"
        if error_message:
            message = f"{message} ({error_message})"
        super().__init__(message)
        self.status = status
        self.error_message = error_message
