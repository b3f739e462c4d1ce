"""State kept for one established HTTP connection."""

import enum
from dataclasses import dataclass


class Status(enum.IntEnum):
    """Status of an HTTP connection, mostly HTTP status codes."""

    CLOSE = -2
    NOT_PROCESSED = -1
    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONTENT_TOO_LARGE = 413
    REQU_HEAD_FIELDS_TOO_LARGE = 431
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    INSUFFICIENT_STORAGE = 507


@dataclass
class ConnectionState:
    """Tracks keep-alive, request budget and status of a connection."""

    timeout: float = 5.0
    keep_alive: bool = True
    max_requests: int = 100
    code: Status = Status.NOT_PROCESSED
    current_request: int = 100

    def next_request(self):
        """Consume one request from the budget and reset the status."""
        self.current_request -= 1
        self.code = Status.NOT_PROCESSED