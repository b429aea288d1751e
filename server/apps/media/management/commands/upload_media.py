"""Management command to upload a local file as a media item."""

import logging
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from server.apps.media.exceptions import MediaUploaderError
from server.apps.media.infrastructure.storage import VISIBILITIES
from server.apps.media.logic.uploader import MediaUploader

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Upload a file from the local filesystem and create a media record."""

    help = 'Upload a local file to a storage disk as a media item'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument('path', help='Path of the file to upload')
        parser.add_argument(
            '--name',
            help='Media name (default: file name without extension)',
        )
        parser.add_argument(
            '--file-name',
            help='Stored file name (default: source file name)',
        )
        parser.add_argument(
            '--disk',
            help='Storage alias (default: MEDIA_UPLOADER_DISK)',
        )
        parser.add_argument(
            '--model',
            help='Media model label (default: MEDIA_UPLOADER_MODEL)',
        )
        parser.add_argument(
            '--visibility',
            choices=VISIBILITIES,
            help='File visibility',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the upload command.

        Args:
            args: Positional arguments (unused).
            options: Command options.

        Raises:
            CommandError: If the uploader rejects the input.
        """
        try:
            uploader = MediaUploader(
                model=options['model'],
                disk=options['disk'],
            ).from_path(options['path'])

            if options['file_name']:
                uploader.set_file_name(options['file_name'])
            if options['name']:
                uploader.set_name(options['name'])
            if options['visibility']:
                uploader.set_visibility(options['visibility'])

            media = uploader.upload()
        except MediaUploaderError as exc:
            logger.warning('Media upload rejected: %s', exc)
            raise CommandError(str(exc)) from exc

        self.stdout.write(
            self.style.SUCCESS(
                f'Uploaded media {media.pk} to '
                f'{media.disk}:{media.get_path()}',
            ),
        )
