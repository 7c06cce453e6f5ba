"""
Tests for storage system creation from configuration.
"""

import os
import sys
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from common.storage_factory import create_storage_system
from systems.aws import AWSSystem
from systems.r2 import R2System


class TestStorageFactory(unittest.TestCase):

    def test_unknown_storage_type(self):
        with self.assertRaises(ValueError) as ctx:
            create_storage_system("azure")
        self.assertEqual(str(ctx.exception), "Unsupported storage type: azure. Must be one of: r2, s3.")

    def test_r2_requires_endpoint(self):
        with patch('systems.r2.R2_ENDPOINT', ''):
            with self.assertRaises(ValueError):
                create_storage_system("r2")

    def test_r2_system(self):
        with patch('systems.r2.R2_ENDPOINT', 'https://account.r2.cloudflarestorage.com'), \
             patch('common.storage_factory.R2_ACCESS_KEY_ID', 'r2-key'):
            system = create_storage_system("R2")

        self.assertIsInstance(system, R2System)
        self.assertEqual(system.endpoint, 'https://account.r2.cloudflarestorage.com')
        self.assertEqual(system.credentials["access_key_id"], 'r2-key')
        self.assertEqual(system.credentials["region_name"], "auto")
        self.assertEqual(system._config.s3["addressing_style"], "path")
        self.assertIsNone(system.location_constraint)

    def test_s3_system_uses_default_endpoint(self):
        with patch('systems.aws.S3_ENDPOINT', ''), \
             patch('common.storage_factory.AWS_REGION', 'eu-north-1'):
            system = create_storage_system("s3")

        self.assertIsInstance(system, AWSSystem)
        self.assertIsNone(system.endpoint)
        self.assertEqual(system.location_constraint, 'eu-north-1')

    def test_s3_us_east_1_has_no_location_constraint(self):
        with patch('common.storage_factory.AWS_REGION', 'us-east-1'):
            system = create_storage_system("s3")

        self.assertIsNone(system.location_constraint)


if __name__ == '__main__':
    unittest.main()
