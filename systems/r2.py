"""
Cloudflare R2 object storage system implementation.
"""

from systems.base import ObjectStorageSystem
from configuration import R2_ENDPOINT
import logging

logger = logging.getLogger(__name__)


class R2System(ObjectStorageSystem):
    """Cloudflare R2 object storage system."""
    
    def __init__(self, credentials: dict = None):
        if credentials is None:
            credentials = {}
        if not R2_ENDPOINT:
            raise ValueError("R2_ENDPOINT is not set; R2 has no default endpoint.")
        
        super().__init__(
            endpoint=R2_ENDPOINT,
            credentials=credentials,
            addressing_style="path",
        )
        logger.info("Initialized R2 system")
