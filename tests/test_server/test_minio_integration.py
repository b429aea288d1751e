"""Integration tests for media uploads to MinIO.

These tests run the S3 disk against a real MinIO server (e.g. the
Docker Compose service). They are deselected by default; run them
with ``pytest -m integration``.
"""
import os
from typing import Final

import boto3
import pytest
from botocore.client import BaseClient
from botocore.exceptions import ClientError
from django.core.files.base import ContentFile

from server.apps.media.logic.uploader import MediaUploader

_TEST_BUCKET: Final = 'media-integration'
_TEST_FILE_CONTENT: Final = b'Hello from MinIO integration test!'
_ALL_USERS_URI: Final = 'http://acs.amazonaws.com/groups/global/AllUsers'


def _minio_credentials() -> tuple[str, str, str]:
    return (
        os.getenv('MINIO_ENDPOINT', 'http://minio:9000'),
        os.getenv('MINIO_ROOT_USER', 'minioadmin'),
        os.getenv('MINIO_ROOT_PASSWORD', 'minioadmin'),
    )


@pytest.fixture
def s3_client() -> BaseClient:
    """Create S3 client for MinIO.

    Returns:
        Configured boto3 S3 client for MinIO.
    """
    endpoint, access_key, secret_key = _minio_credentials()
    return boto3.client(
        's3',
        endpoint_url=endpoint,
        aws_access_key_id=access_key,
        aws_secret_access_key=secret_key,
        region_name='us-east-1',
    )


@pytest.fixture
def test_bucket(s3_client: BaseClient) -> str:
    """Ensure test bucket exists.

    Args:
        s3_client: boto3 S3 client.

    Returns:
        Name of the test bucket.
    """
    try:
        s3_client.head_bucket(Bucket=_TEST_BUCKET)
    except ClientError:
        s3_client.create_bucket(Bucket=_TEST_BUCKET)

    return _TEST_BUCKET


@pytest.fixture
def minio_disk(settings, test_bucket: str) -> str:
    """Register a ``minio`` disk next to the configured ones.

    Args:
        settings: pytest-django settings fixture.
        test_bucket: Name of the test bucket.

    Returns:
        Storage alias of the MinIO disk.
    """
    endpoint, access_key, secret_key = _minio_credentials()
    settings.STORAGES = {
        **settings.STORAGES,
        'minio': {
            'BACKEND': (
                'server.apps.media.infrastructure.storage.MediaS3Storage'
            ),
            'OPTIONS': {
                'bucket_name': test_bucket,
                'access_key': access_key,
                'secret_key': secret_key,
                'endpoint_url': endpoint,
                'region_name': 'us-east-1',
            },
        },
    }
    return 'minio'


@pytest.mark.integration
@pytest.mark.django_db
def test_upload_media_to_minio(
    s3_client: BaseClient,
    test_bucket: str,
    minio_disk: str,
) -> None:
    """Test uploading media writes the object under the media path."""
    media = (
        MediaUploader(disk=minio_disk)
        .from_file(ContentFile(_TEST_FILE_CONTENT, name='greeting.txt'))
        .upload()
    )

    response = s3_client.head_object(Bucket=test_bucket, Key=media.get_path())
    assert response['ResponseMetadata']['HTTPStatusCode'] == 200
    assert response['ContentLength'] == len(_TEST_FILE_CONTENT)
    assert media.size == len(_TEST_FILE_CONTENT)


@pytest.mark.integration
@pytest.mark.django_db
def test_upload_public_media_to_minio(
    s3_client: BaseClient,
    test_bucket: str,
    minio_disk: str,
) -> None:
    """Test public visibility is stored as a public-read ACL."""
    media = (
        MediaUploader(disk=minio_disk)
        .from_file(ContentFile(_TEST_FILE_CONTENT, name='public.txt'))
        .set_visibility('public')
        .upload()
    )

    response = s3_client.get_object_acl(
        Bucket=test_bucket,
        Key=media.get_path(),
    )
    assert any(
        grant['Grantee'].get('URI') == _ALL_USERS_URI
        for grant in response['Grants']
    )
