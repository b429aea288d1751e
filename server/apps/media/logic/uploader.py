"""Builder that uploads a file and records it as a media item."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Self

from django.apps import apps
from django.conf import settings
from django.core.files.base import File as DjangoFile
from django.core.files.storage import Storage
from django.core.files.uploadedfile import UploadedFile
from django.db import transaction

from server.apps.media.exceptions import (
    DiskNotResolvableError,
    InvalidModelError,
    InvalidSourceError,
    InvalidVisibilityError,
    MediaUploaderError,
    SourceFileNotFoundError,
    UnknownAttributeError,
)
from server.apps.media.infrastructure.metadata import (
    detect_mime_type,
    extract_name,
    sanitise_file_name,
)
from server.apps.media.infrastructure.storage import (
    VISIBILITIES,
    put_file,
    resolve_disk,
)
from server.apps.media.models import AbstractMedia

_DEFAULT_MODEL: Final = 'media.Media'
_DEFAULT_DISK: Final = 'default'

logger = logging.getLogger(__name__)


def get_default_model() -> str:
    """Get the media model label from settings.

    Returns:
        'app_label.ModelName' of the model used for new media.
    """
    return getattr(settings, 'MEDIA_UPLOADER_MODEL', _DEFAULT_MODEL)


def get_default_disk() -> str:
    """Get the upload disk from settings.

    Returns:
        Storage alias uploads are written to.
    """
    return getattr(settings, 'MEDIA_UPLOADER_DISK', _DEFAULT_DISK)


class MediaUploader:
    """Collect upload options, then create a media record and store its file.

    Usage::

        media = (
            MediaUploader()
            .from_file(request.FILES['document'])
            .set_name('Quarterly report')
            .set_visibility('private')
            .upload()
        )

    Setters validate their argument immediately and return the
    uploader, so invalid configuration fails at the call that
    introduced it rather than at ``upload()``.
    """

    def __init__(
        self,
        *,
        model: type[AbstractMedia] | str | None = None,
        disk: str | None = None,
    ) -> None:
        """Initialize uploader with model and disk.

        Args:
            model: Media model class or 'app_label.ModelName'.
                Defaults to ``settings.MEDIA_UPLOADER_MODEL``.
            disk: Storage alias. Defaults to
                ``settings.MEDIA_UPLOADER_DISK``.

        Raises:
            InvalidModelError: If model is not a media model.
            DiskNotResolvableError: If disk cannot be resolved.
        """
        self._source_path: Path | None = None
        self._source_file: DjangoFile | None = None
        self._source_name = ''
        self._file_name = ''
        self._name = ''
        self._attributes: dict[str, Any] = {}
        self._visibility: str | None = None

        self.set_model(model or get_default_model())
        self.set_disk(disk or get_default_disk())

    @property
    def model(self) -> type[AbstractMedia]:
        """Model class used for new media records."""
        return self._model

    @property
    def disk(self) -> str:
        """Storage alias the file is written to."""
        return self._disk

    @property
    def storage(self) -> Storage:
        """Storage backend resolved for the disk."""
        return self._storage

    @property
    def file_name(self) -> str:
        """Sanitised file name the file is stored under."""
        return self._file_name

    @property
    def name(self) -> str:
        """Human readable name of the media record."""
        return self._name

    @property
    def attributes(self) -> dict[str, Any]:
        """Copy of the extra model field values."""
        return dict(self._attributes)

    @property
    def visibility(self) -> str | None:
        """Requested visibility, or None to keep the disk default."""
        return self._visibility

    def from_file(self, file: DjangoFile) -> Self:
        """Use a Django file as the upload source.

        Uploaded files keep the client's original file name. Other
        Django files wrapping an open OS file are read from its path;
        the rest (e.g. ``ContentFile``) are streamed like uploads.

        Args:
            file: ``UploadedFile`` or any other Django ``File``.

        Returns:
            The uploader.

        Raises:
            InvalidSourceError: If file is not a Django File or has no name.
            SourceFileNotFoundError: If the backing path is not a file.
        """
        if isinstance(file, UploadedFile):
            return self._from_file_object(file)

        if isinstance(file, DjangoFile):
            # file.name is a logical name, the wrapped OS file holds the path
            backing_path = getattr(file.file, 'name', None)
            if isinstance(backing_path, str) and os.path.isfile(backing_path):
                return self.from_path(backing_path)
            return self._from_file_object(file)

        raise InvalidSourceError(
            'The file parameter must be an instance of '
            f'"{UploadedFile.__module__}.{UploadedFile.__name__}" or '
            f'"{DjangoFile.__module__}.{DjangoFile.__name__}".',
        )

    def from_path(self, path: str | os.PathLike[str]) -> Self:
        """Use a file on the local filesystem as the upload source.

        Args:
            path: Path to an existing regular file.

        Returns:
            The uploader.

        Raises:
            SourceFileNotFoundError: If path is not an existing file.
        """
        source_path = Path(path)
        if not source_path.is_file():
            raise SourceFileNotFoundError(os.fspath(path))

        self._source_path = source_path
        self._source_file = None
        self._source_name = source_path.name
        self.set_file_name(source_path.name)
        self.set_name(source_path.stem)
        return self

    def set_model(self, model: type[AbstractMedia] | str) -> Self:
        """Set the model class used for new media records.

        Args:
            model: Concrete subclass of AbstractMedia, or its
                'app_label.ModelName' label.

        Returns:
            The uploader.

        Raises:
            InvalidModelError: If model does not resolve to a
                concrete media model.
        """
        model_class: Any = model
        if isinstance(model, str):
            try:
                model_class = apps.get_model(model)
            except (LookupError, ValueError) as error:
                raise InvalidModelError(model) from error

        is_media_model = (
            isinstance(model_class, type)
            and issubclass(model_class, AbstractMedia)
            and not model_class._meta.abstract  # noqa: WPS437
        )
        if not is_media_model:
            raise InvalidModelError(model)

        self._model = model_class
        return self

    def set_disk(self, disk: str) -> Self:
        """Set the disk the file is written to.

        Args:
            disk: Storage alias from the ``STORAGES`` setting.

        Returns:
            The uploader.

        Raises:
            DiskNotResolvableError: If no storage can be built for
                disk.
        """
        try:
            storage = resolve_disk(disk)
        except Exception as error:
            raise DiskNotResolvableError(disk) from error

        self._storage = storage
        self._disk = disk
        return self

    def set_file_name(self, file_name: str) -> Self:
        """Set the stored file name; unsafe characters become dashes."""
        self._file_name = sanitise_file_name(file_name)
        return self

    def set_name(self, name: str) -> Self:
        """Set the human readable name of the media record."""
        self._name = name
        return self

    def set_attributes(self, attributes: Mapping[str, Any]) -> Self:
        """Set extra model field values, replacing earlier ones.

        They are applied after the derived fields, so they can
        override name, file_name and the rest.
        """
        self._attributes = dict(attributes)
        return self

    def set_visibility(self, visibility: str) -> Self:
        """Set the file visibility.

        Args:
            visibility: 'public' or 'private'.

        Returns:
            The uploader.

        Raises:
            InvalidVisibilityError: If visibility is not accepted.
        """
        if visibility not in VISIBILITIES:
            raise InvalidVisibilityError(visibility, VISIBILITIES)

        self._visibility = visibility
        return self

    def upload(self) -> AbstractMedia:
        """Create the media record and write its file to the disk.

        The record is saved first because its primary key is part of
        the storage path. Both steps share one transaction: if the
        storage write fails, the record is rolled back.

        Returns:
            Saved media instance.

        Raises:
            InvalidSourceError: If no source file was set.
            UnknownAttributeError: If extra attributes name unknown fields.
            Exception: If the database or storage write fails.
        """
        if self._source_path is None and self._source_file is None:
            raise InvalidSourceError(
                'No file to upload, call from_file() or from_path() first.',
            )
        if not self._file_name:
            raise MediaUploaderError('The file name must not be empty.')

        media = self._make_model()
        media.name = self._name
        media.file_name = self._file_name
        media.disk = self._disk
        media.mime_type = detect_mime_type(self._source_name)
        media.size = self._source_size()
        self._fill(media)

        with transaction.atomic():
            media.save()
            logger.info(
                'Media record created: %s (ID: %d)',
                media.file_name,
                media.pk,
            )
            self._write(media)

        return media

    def _from_file_object(self, file: DjangoFile) -> Self:
        if not file.name:
            raise InvalidSourceError('The file parameter must have a name.')

        self._source_path = None
        self._source_file = file
        self._source_name = Path(file.name).name
        self.set_file_name(self._source_name)
        self.set_name(extract_name(self._source_name))
        return self

    def _source_size(self) -> int:
        if self._source_path is not None:
            return self._source_path.stat().st_size
        return self._source_file.size  # type: ignore[union-attr]

    def _fill(self, media: AbstractMedia) -> None:
        field_names = set()
        for field in media._meta.concrete_fields:  # noqa: WPS437
            field_names.update((field.name, field.attname))

        unknown = set(self._attributes) - field_names
        if unknown:
            raise UnknownAttributeError(unknown)

        for attribute, attribute_value in self._attributes.items():
            setattr(media, attribute, attribute_value)

    def _write(self, media: AbstractMedia) -> None:
        storage_path = media.get_path()
        try:
            if self._source_path is not None:
                with self._source_path.open('rb') as source:
                    saved_name = put_file(
                        self._storage,
                        storage_path,
                        source,
                        self._visibility,
                    )
            else:
                # Rewinds open files and reopens closed, path-backed ones
                self._source_file.open()  # type: ignore[union-attr]
                saved_name = put_file(
                    self._storage,
                    storage_path,
                    self._source_file,
                    self._visibility,
                )
        except Exception:
            logger.exception(
                'Failed to write media file, rolling back record: %s',
                storage_path,
            )
            raise

        if saved_name != storage_path:
            logger.warning(
                'Storage renamed media file: %s -> %s',
                storage_path,
                saved_name,
            )
        logger.info('Media file written to disk %s: %s', self._disk, saved_name)

    def _make_model(self) -> AbstractMedia:
        return self._model()
