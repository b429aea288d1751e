"""Storage backends that apply file visibility."""

import logging
import os
from typing import Any, Final, final, override

from django.core.files.storage import FileSystemStorage, Storage, storages
from storages.backends.s3 import S3Storage
from storages.utils import clean_name

VISIBILITY_PUBLIC: Final = 'public'
VISIBILITY_PRIVATE: Final = 'private'
VISIBILITIES: Final = (VISIBILITY_PUBLIC, VISIBILITY_PRIVATE)

_S3_ACLS: Final = {
    VISIBILITY_PUBLIC: 'public-read',
    VISIBILITY_PRIVATE: 'private',
}
_FILE_MODES: Final = {
    VISIBILITY_PUBLIC: 0o644,
    VISIBILITY_PRIVATE: 0o600,
}

logger = logging.getLogger(__name__)


def resolve_disk(disk: str) -> Storage:
    """Get the storage backend configured for a disk.

    Uploads and media records both resolve disks here, so a record
    always finds its file through the same ``STORAGES`` alias.

    Args:
        disk: Storage alias from the ``STORAGES`` setting.

    Returns:
        Storage instance for the alias.

    Raises:
        InvalidStorageError: If the alias is not configured.
    """
    return storages[disk]


class VisibilityStorageMixin:
    """Adds ``put``: overwrite a file and apply a visibility to it.

    Django storages never overwrite by default (a suffix is added to
    conflicting names instead), so ``put`` removes an existing file
    first and the caller gets the exact name it asked for.
    """

    def put(
        self,
        name: str,
        content: Any,
        visibility: str | None = None,
    ) -> str:
        """Write content to name, replacing any existing file.

        Args:
            name: Storage path for the file.
            content: File content (file-like object).
            visibility: Optional 'public' or 'private'.

        Returns:
            Storage path the content was written to.
        """
        if self.exists(name):  # type: ignore[attr-defined]
            logger.info('Overwriting existing file: %s', name)
            self.delete(name)  # type: ignore[attr-defined]

        saved_name: str = self.save(name, content)  # type: ignore[attr-defined]
        if visibility is not None:
            try:
                self.set_visibility(saved_name, visibility)
            except Exception:
                logger.exception(
                    'Failed to set visibility %s on: %s',
                    visibility,
                    saved_name,
                )
                self.rollback_upload(saved_name)
                raise
        return saved_name

    def rollback_upload(self, name: str) -> None:
        """Delete a file whose upload did not complete.

        This is a best-effort operation - if deletion fails, the error
        is logged but not raised, so the original error propagates.

        Args:
            name: Storage path of file to delete.
        """
        try:
            logger.warning('Rolling back upload, deleting file: %s', name)
            self.delete(name)  # type: ignore[attr-defined]
            logger.info('Successfully rolled back file upload: %s', name)
        except Exception:
            # The file stays in storage without a media record
            logger.exception(
                'Failed to rollback upload, orphaned file: %s',
                name,
            )

    def set_visibility(self, name: str, visibility: str) -> None:
        """Apply visibility to a stored file.

        Args:
            name: Storage path of the file.
            visibility: 'public' or 'private'.
        """
        raise NotImplementedError


@final
class MediaS3Storage(VisibilityStorageMixin, S3Storage):
    """S3 storage backend for media files.

    Extends django-storages S3Storage with:
    - Visibility mapped to canned ACLs
    - Enhanced error logging
    """

    @override
    def save(  # noqa: WPS211
        self,
        name: str,
        content: Any,
        max_length: int | None = None,
    ) -> str:
        """Save file to S3 with error handling and logging.

        Args:
            name: Storage path for the file.
            content: File content (file-like object).
            max_length: Optional maximum length for the filename.

        Returns:
            Actual storage path used.

        Raises:
            Exception: If S3 upload fails.
        """
        try:
            logger.info('Uploading file to storage: %s', name)
            saved_name = super().save(name, content, max_length)
            logger.info('Successfully uploaded file: %s', saved_name)
        except Exception:
            logger.exception('Failed to upload file to storage: %s', name)
            raise
        else:
            return saved_name

    @override
    def delete(self, name: str) -> None:
        """Delete file from S3 with error handling and logging.

        Args:
            name: Storage path of file to delete.

        Raises:
            Exception: If S3 delete fails.
        """
        try:
            logger.info('Deleting file from storage: %s', name)
            super().delete(name)
            logger.info('Successfully deleted file: %s', name)
        except Exception:
            logger.exception('Failed to delete file from storage: %s', name)
            raise

    @override
    def set_visibility(self, name: str, visibility: str) -> None:
        """Apply the canned ACL matching visibility to an object.

        Args:
            name: Storage path of the object.
            visibility: 'public' or 'private'.

        Raises:
            Exception: If the ACL request fails.
        """
        acl = _S3_ACLS[visibility]
        key = self._normalize_name(clean_name(name))
        try:
            logger.info('Setting ACL %s on: %s', acl, name)
            self.bucket.Object(key).Acl().put(ACL=acl)
        except Exception:
            logger.exception('Failed to set ACL %s on: %s', acl, name)
            raise


@final
class MediaFileSystemStorage(VisibilityStorageMixin, FileSystemStorage):
    """Local filesystem storage with visibility mapped to permissions."""

    @override
    def set_visibility(self, name: str, visibility: str) -> None:
        os.chmod(self.path(name), _FILE_MODES[visibility])


def put_file(
    storage: Storage,
    name: str,
    content: Any,
    visibility: str | None = None,
) -> str:
    """Write content to any Django storage at exactly name.

    Storages without visibility support still get the overwrite
    behaviour of ``put``; a requested visibility is logged and skipped.

    Args:
        storage: Resolved storage backend.
        name: Storage path for the file.
        content: File content (file-like object).
        visibility: Optional 'public' or 'private'.

    Returns:
        Storage path the content was written to.
    """
    if isinstance(storage, VisibilityStorageMixin):
        return storage.put(name, content, visibility)

    if visibility is not None:
        logger.warning(
            'Storage %s does not support visibility, ignoring "%s" for %s',
            type(storage).__name__,
            visibility,
            name,
        )
    if storage.exists(name):
        storage.delete(name)
    return storage.save(name, content)
