"""
AWS S3 object storage system implementation.
"""

from systems.base import ObjectStorageSystem
from configuration import S3_ENDPOINT, AWS_REGION
import logging

logger = logging.getLogger(__name__)


class AWSSystem(ObjectStorageSystem):
    """AWS S3 object storage system."""
    
    def __init__(self, credentials: dict = None):
        if credentials is None:
            credentials = {}
        
        region = credentials.get("region_name", AWS_REGION)
        super().__init__(
            endpoint=S3_ENDPOINT,
            credentials=credentials,
            addressing_style="virtual",
            # us-east-1 rejects an explicit location constraint
            location_constraint=None if region == "us-east-1" else region,
        )
        logger.info("Initialized AWS S3 system")
