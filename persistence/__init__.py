"""
Operation log persistence.
"""

from .record import LogRecord, Outcome
from .operation_log import LogWriteMode, OperationLogger, log_blob_name_for

__all__ = ['LogRecord', 'Outcome', 'LogWriteMode', 'OperationLogger', 'log_blob_name_for']
