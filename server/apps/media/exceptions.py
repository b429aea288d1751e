"""Exceptions for media app."""

from collections.abc import Iterable


class MediaUploaderError(ValueError):
    """Base class for invalid media uploader input or configuration."""


class DiskNotResolvableError(MediaUploaderError):
    """Raised when a disk name is not a configured storage alias."""

    def __init__(self, disk: str) -> None:
        """Initialize DiskNotResolvableError.

        Args:
            disk: Storage alias that could not be resolved.
        """
        self.disk = disk
        super().__init__(f'Disk "{disk}" cannot be resolved.')


class InvalidVisibilityError(MediaUploaderError):
    """Raised when a visibility is not one of the accepted values."""

    def __init__(self, visibility: str, accepted: Iterable[str]) -> None:
        """Initialize InvalidVisibilityError.

        Args:
            visibility: Rejected visibility value.
            accepted: Values that would have been accepted.
        """
        self.visibility = visibility
        self.accepted = tuple(accepted)
        accepted_values = '", "'.join(self.accepted)
        super().__init__(
            f'Visibility "{visibility}" is not one of the accepted '
            f'values: "{accepted_values}".',
        )


class InvalidModelError(MediaUploaderError):
    """Raised when a model is not a media model."""

    def __init__(self, model: object) -> None:
        """Initialize InvalidModelError.

        Args:
            model: Rejected model class or model label.
        """
        self.model = model
        super().__init__(
            f'Model "{model}" must be a subclass of '
            '"server.apps.media.models.AbstractMedia".',
        )


class SourceFileNotFoundError(MediaUploaderError):
    """Raised when the source path does not point to a file."""

    def __init__(self, path: str) -> None:
        """Initialize SourceFileNotFoundError.

        Args:
            path: Missing source path.
        """
        self.path = path
        super().__init__(f'File "{path}" does not exist.')


class InvalidSourceError(MediaUploaderError):
    """Raised when the uploader has no usable source file."""


class UnknownAttributeError(MediaUploaderError):
    """Raised when extra attributes name fields the model does not have."""

    def __init__(self, names: Iterable[str]) -> None:
        """Initialize UnknownAttributeError.

        Args:
            names: Attribute names without a matching model field.
        """
        self.names = tuple(sorted(names))
        super().__init__(
            'Unknown media attributes: {0}.'.format(', '.join(self.names)),
        )
