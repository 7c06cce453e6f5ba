"""
Factory module for creating storage system instances.
"""

import logging

# Quiet the AWS SDK loggers before any boto3-related module is imported
logging.getLogger('botocore').setLevel(logging.WARNING)
logging.getLogger('boto3').setLevel(logging.WARNING)
logging.getLogger('aioboto3').setLevel(logging.WARNING)
logging.getLogger('urllib3').setLevel(logging.WARNING)
logging.getLogger('s3transfer').setLevel(logging.WARNING)

from systems.r2 import R2System
from systems.aws import AWSSystem
from configuration import (
    R2_ACCESS_KEY_ID,
    R2_SECRET_ACCESS_KEY,
    AWS_ACCESS_KEY_ID,
    AWS_SECRET_ACCESS_KEY,
    AWS_REGION,
    STORAGE_TYPES,
)

logger = logging.getLogger(__name__)


def create_storage_system(storage_type: str):
    """Create and return the appropriate storage system based on type.

    Args:
        storage_type: Storage type ('r2' or 's3')

    Returns:
        Storage system instance (R2System or AWSSystem)

    Raises:
        ValueError: If storage_type is not supported or its endpoint is missing
    """
    storage_type = storage_type.lower()

    if storage_type == "r2":
        credentials = {
            "access_key_id": R2_ACCESS_KEY_ID,
            "secret_access_key": R2_SECRET_ACCESS_KEY,
            "region_name": "auto",
        }
        return R2System(credentials)

    elif storage_type == "s3":
        credentials = {
            "access_key_id": AWS_ACCESS_KEY_ID,
            "secret_access_key": AWS_SECRET_ACCESS_KEY,
            "region_name": AWS_REGION,
        }
        return AWSSystem(credentials)

    else:
        raise ValueError(f"Unsupported storage type: {storage_type}. Must be one of: {', '.join(STORAGE_TYPES)}.")
