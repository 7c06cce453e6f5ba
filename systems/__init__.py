"""
Object storage backends.
"""

from .interface import ObjectStore
from .base import ObjectStorageSystem
from .aws import AWSSystem
from .r2 import R2System

__all__ = ['ObjectStore', 'ObjectStorageSystem', 'AWSSystem', 'R2System']
