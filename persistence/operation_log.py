"""
Operation log: one text blob per UTC day in a dedicated log container.

In overwrite mode every write replaces the day's blob with the newest record
only. Append mode reads the blob back first and keeps every record of the day.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from configuration import LOG_BLOB_DATE_FORMAT, LOG_BLOB_PREFIX, LOG_BLOB_SUFFIX
from persistence.record import LogRecord, Outcome
from systems.interface import ObjectStore

logger = logging.getLogger(__name__)


class LogWriteMode(Enum):
    OVERWRITE = "overwrite"
    APPEND = "append"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def log_blob_name_for(moment: datetime) -> str:
    """Name of the log blob holding records for the UTC day of `moment`."""
    return f"{LOG_BLOB_PREFIX}{_as_utc(moment).strftime(LOG_BLOB_DATE_FORMAT)}{LOG_BLOB_SUFFIX}"


class OperationLogger:
    """Writes success/error records for gateway operations to the log container."""

    def __init__(
        self,
        store: ObjectStore,
        log_container: str,
        mode: LogWriteMode = LogWriteMode.OVERWRITE,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.log_container = log_container
        self.mode = mode
        self.clock = clock or _utc_now
        self._container_ready = False

    def log_blob_name_for_today(self) -> str:
        return log_blob_name_for(self.clock())

    async def record_success(self, action: str, container: str, blob_name: str) -> LogRecord:
        record = LogRecord(
            outcome=Outcome.SUCCESS,
            action=action,
            container=container,
            blob_name=blob_name,
            timestamp=_as_utc(self.clock()),
        )
        await self._write(record)
        return record

    async def record_error(
        self, action: str, container: str, blob_name: str, error_detail: str
    ) -> LogRecord:
        record = LogRecord(
            outcome=Outcome.ERROR,
            action=action,
            container=container,
            blob_name=blob_name,
            timestamp=_as_utc(self.clock()),
            error_detail=error_detail,
        )
        await self._write(record)
        return record

    async def _write(self, record: LogRecord) -> None:
        """Store the record. Store failures propagate to the caller."""
        if not self._container_ready:
            await self.store.ensure_container(self.log_container)
            self._container_ready = True

        blob_name = log_blob_name_for(record.timestamp)
        content = record.render() + "\n"
        if self.mode is LogWriteMode.APPEND:
            content = await self._read_existing(blob_name) + content

        await self.store.put_object(self.log_container, blob_name, content.encode("utf-8"))
        logger.debug(f"Wrote {record.outcome.value} record for {record.action} to {blob_name}")

    async def _read_existing(self, blob_name: str) -> str:
        if not await self.store.object_exists(self.log_container, blob_name):
            return ""
        chunks = []
        async for chunk in await self.store.get_object(self.log_container, blob_name):
            chunks.append(chunk)
        return b"".join(chunks).decode("utf-8")
