"""
Log record written for each logged gateway operation.
"""

from datetime import datetime
from enum import Enum
from typing import NamedTuple, Optional

from configuration import LOG_TIMESTAMP_FORMAT


class Outcome(Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class LogRecord(NamedTuple):
    """One completed operation, rendered as a single line of text."""

    outcome: Outcome
    action: str
    container: str
    blob_name: str
    timestamp: datetime
    error_detail: Optional[str] = None

    def render(self) -> str:
        parts = [
            f"[{self.outcome.value}] Action: {self.action}",
            f"Container: {self.container}",
            f"Blob: {self.blob_name}",
        ]
        if self.outcome is Outcome.ERROR:
            parts.append(f"Error: {self.error_detail or ''}")
        parts.append(f"Timestamp: {self.timestamp.strftime(LOG_TIMESTAMP_FORMAT)}")
        return ", ".join(parts)
