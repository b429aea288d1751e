"""Database models for media app."""

from typing import Final, override

from django.core.files.storage import Storage
from django.db import models

from server.apps.media.infrastructure.metadata import get_file_extension
from server.apps.media.infrastructure.storage import resolve_disk

# Constants for field max lengths
_NAME_MAX_LENGTH: Final = 255
_FILE_NAME_MAX_LENGTH: Final = 255
_DISK_MAX_LENGTH: Final = 255
_MIME_TYPE_MAX_LENGTH: Final = 255


class AbstractMedia(models.Model):
    """Uploaded file stored on one of the configured disks.

    A disk is a storage alias from the ``STORAGES`` setting. The file
    lives at ``{pk}/{file_name}`` on that disk, so the record must be
    saved before its file can be written.

    Custom media models subclass this and add their own fields.
    """

    name = models.CharField(
        max_length=_NAME_MAX_LENGTH,
        help_text='Human readable name',
    )

    file_name = models.CharField(
        max_length=_FILE_NAME_MAX_LENGTH,
        help_text='Sanitised file name, last component of the storage path',
    )

    disk = models.CharField(
        max_length=_DISK_MAX_LENGTH,
        help_text='Storage alias the file is written to',
    )

    mime_type = models.CharField(
        max_length=_MIME_TYPE_MAX_LENGTH,
        help_text='MIME type guessed from the file name',
    )

    size = models.PositiveBigIntegerField(
        help_text='File size in bytes',
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Model metadata."""

        abstract = True
        ordering = ['-created_at']

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.disk}:{self.name}'

    def filesystem(self) -> Storage:
        """Get the storage backend for this record's disk.

        Returns:
            Storage instance configured under ``disk``.
        """
        return resolve_disk(self.disk)

    def get_directory(self) -> str:
        """Directory holding the file: the primary key.

        Returns:
            Directory name on the disk.
        """
        return str(self.pk)

    def get_path(self) -> str:
        """Storage path of the file.

        Example: pk 12, 'report.pdf' -> '12/report.pdf'

        Returns:
            Path relative to the disk root.
        """
        return f'{self.get_directory()}/{self.file_name}'

    def get_url(self) -> str:
        """Get URL for the file.

        Returns:
            URL generated by the disk's storage backend.
        """
        return self.filesystem().url(self.get_path())

    def get_extension(self) -> str:
        """Extract file extension.

        Example: 'file.PDF' -> 'pdf'

        Returns:
            Extension without dot (lowercase).
        """
        return get_file_extension(self.file_name)

    def get_type(self) -> str:
        """Top-level MIME type.

        Example: 'image/jpeg' -> 'image'

        Returns:
            Part of mime_type before the slash.
        """
        return self.mime_type.partition('/')[0]

    def is_of_type(self, media_type: str) -> bool:
        """Check the top-level MIME type.

        Args:
            media_type: Type to compare with (e.g., 'image').

        Returns:
            True if get_type() equals media_type.
        """
        return self.get_type() == media_type


class Media(AbstractMedia):
    """Default media model (``media.Media``)."""

    class Meta(AbstractMedia.Meta):
        """Model metadata."""

        verbose_name = 'Media'  # type: ignore[mutable-override]
        verbose_name_plural = 'Media'  # type: ignore[mutable-override]
        indexes = [
            models.Index(
                fields=['disk', '-created_at'],
                name='media_disk_recent_idx',
            ),
        ]
