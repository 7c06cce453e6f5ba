"""
Configuration constants for the blob console.

This module contains all configuration parameters including:
- Cloud credentials and endpoints
- Container names and the operation-log layout
- Client timeouts and retry settings
"""

import os

# =============================================================================
# CLOUD STORAGE CONFIGURATION
# =============================================================================

# Which S3-compatible backend to talk to ('r2' or 's3')
STORAGE_TYPE: str = os.getenv("STORAGE_TYPE", "r2")
STORAGE_TYPES: tuple = ("r2", "s3")

# Container (bucket) holding operator data, and the one holding operation logs
DATA_CONTAINER: str = os.getenv("DATA_CONTAINER", "data")
LOG_CONTAINER: str = os.getenv("LOG_CONTAINER", "logs")

# AWS S3 credentials and configuration
S3_ENDPOINT: str = os.getenv("S3_ENDPOINT", "")
AWS_ACCESS_KEY_ID: str = os.getenv("AWS_ACCESS_KEY_ID", "")
AWS_SECRET_ACCESS_KEY: str = os.getenv("AWS_SECRET_ACCESS_KEY", "")
AWS_REGION: str = os.getenv("AWS_REGION", "eu-north-1")

# Cloudflare R2 credentials and configuration
R2_ENDPOINT: str = os.getenv("R2_ENDPOINT", "")
R2_ACCESS_KEY_ID: str = os.getenv("R2_ACCESS_KEY_ID", "")
R2_SECRET_ACCESS_KEY: str = os.getenv("R2_SECRET_ACCESS_KEY", "")

# =============================================================================
# OPERATION LOG
# =============================================================================

# 'overwrite' keeps only the latest record per day, 'append' keeps all of them
LOG_WRITE_MODE: str = os.getenv("LOG_WRITE_MODE", "overwrite")

LOG_BLOB_PREFIX: str = "log_"
LOG_BLOB_DATE_FORMAT: str = "%Y%m%d"
LOG_BLOB_SUFFIX: str = ".txt"
LOG_TIMESTAMP_FORMAT: str = "%Y-%m-%dT%H:%M:%SZ"

# =============================================================================
# TRANSFER AND TIMEOUTS
# =============================================================================

BYTES_PER_MB: int = 1024 * 1024
DOWNLOAD_CHUNK_BYTES: int = BYTES_PER_MB

CONNECT_TIMEOUT_SECONDS: int = 5
REQUEST_TIMEOUT_SECONDS: int = 60
MAX_RETRIES: int = 3  # Maximum number of attempts made by botocore

# =============================================================================
# HTTP STATUS CODES
# =============================================================================

HTTP_NOT_FOUND_STATUS: int = 404

# =============================================================================
# CLI DEFAULTS
# =============================================================================

MENU_LIST: str = "1"
MENU_UPLOAD: str = "2"
MENU_DOWNLOAD: str = "3"
MENU_DELETE: str = "4"
MENU_EXIT: str = "5"
