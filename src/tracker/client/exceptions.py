"""Client-side errors raised by the tracker API client."""


class TrackerClientError(Exception):
    """Base class for tracker client errors."""


class TrackerAPIError(TrackerClientError):
    """A request failed, either with a non-2xx response or a transport error.

    `status_code` is None for transport failures (connection refused, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SnapshotLoadError(TrackerClientError):
    """Loading the deliverable snapshot failed; no partial data is returned."""
