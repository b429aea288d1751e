"""Shared fixtures for media app tests."""

from pathlib import Path
from typing import Final

import boto3
import pytest
from django.core.files.base import ContentFile
from moto import mock_aws

TEST_BUCKET: Final = 'media-test'


@pytest.fixture(autouse=True)
def media_storages(settings, tmp_path):
    """Point the storage aliases at a test bucket and a temp directory.

    Returns:
        The STORAGES setting used by the test.
    """
    settings.STORAGES = {
        'default': {
            'BACKEND': (
                'server.apps.media.infrastructure.storage.MediaS3Storage'
            ),
            'OPTIONS': {
                'bucket_name': TEST_BUCKET,
                'access_key': 'testing',
                'secret_key': 'testing',
                'region_name': 'us-east-1',
            },
        },
        'local': {
            'BACKEND': (
                'server.apps.media.infrastructure.storage.'
                'MediaFileSystemStorage'
            ),
            'OPTIONS': {
                'location': str(tmp_path / 'media'),
                'base_url': '/media/',
            },
        },
        'staticfiles': {
            'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
        },
    }
    return settings.STORAGES


@pytest.fixture
def mock_s3():
    """Mock S3 service with the test bucket.

    Yields:
        boto3 S3 resource with the test bucket created.
    """
    with mock_aws():
        # Create S3 resource
        conn = boto3.resource('s3', region_name='us-east-1')

        # Create bucket
        conn.create_bucket(Bucket=TEST_BUCKET)

        yield conn


@pytest.fixture
def document_path():
    """Path of a small text file shipped with the tests.

    Returns:
        Path to files/document.txt.
    """
    return Path(__file__).parent / 'files' / 'document.txt'


@pytest.fixture
def sample_file_content():
    """Sample file content for testing.

    Returns:
        ContentFile with test data.
    """
    return ContentFile(b'test file content', name='test.txt')
