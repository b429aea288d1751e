"""Django storage configuration.

Every key of ``STORAGES`` is a disk the media uploader can write to:
- ``default``: S3-compatible bucket (MinIO locally, R2/S3 in production)
  through django-storages
- ``local``: the local filesystem under ``MEDIA_ROOT``
"""

from typing import Any, Final

from server.settings.components import config
from server.settings.components.common import MEDIA_ROOT, MEDIA_URL

STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': 'server.apps.media.infrastructure.storage.MediaS3Storage',
        'OPTIONS': {
            'bucket_name': config('AWS_STORAGE_BUCKET_NAME', default='media'),
            'access_key': config('AWS_ACCESS_KEY_ID', default='minioadmin'),
            'secret_key': config(
                'AWS_SECRET_ACCESS_KEY',
                default='minioadmin',
            ),
            'endpoint_url': config(
                'AWS_S3_ENDPOINT_URL',
                default=None,
            ),
            'region_name': config(
                'AWS_S3_REGION_NAME',
                default='auto',
            ),
            'default_acl': None,  # Inherit bucket ACL unless visibility is set
        },
    },
    'local': {
        'BACKEND': (
            'server.apps.media.infrastructure.storage.MediaFileSystemStorage'
        ),
        'OPTIONS': {
            'location': MEDIA_ROOT,
            'base_url': MEDIA_URL,
        },
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
