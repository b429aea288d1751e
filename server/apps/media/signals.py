"""Signal handlers for media app."""

import logging

from django.db.models.signals import post_delete
from django.dispatch import receiver

from server.apps.media.models import AbstractMedia

logger = logging.getLogger(__name__)


@receiver(post_delete)
def delete_media_from_disk(
    sender: type[object],
    instance: object,
    **kwargs: object,
) -> None:
    """Delete the media file from its disk when the record is deleted.

    Connected for every model so custom media models (subclasses of
    AbstractMedia) are covered; other senders are ignored.

    Args:
        sender: The deleted instance's model class.
        instance: The instance being deleted.
        **kwargs: Additional signal arguments.
    """
    if not isinstance(instance, AbstractMedia):
        return

    storage_path = instance.get_path()
    logger.info(
        'Deleting media file after DB delete: %s on disk %s',
        storage_path,
        instance.disk,
    )

    try:
        storage = instance.filesystem()
        if storage.exists(storage_path):
            storage.delete(storage_path)
            logger.info('Media file deleted from disk: %s', storage_path)
        else:
            logger.warning(
                'Media file not found on disk (already deleted?): %s',
                storage_path,
            )
    except Exception:
        # DB delete already succeeded; the file is orphaned
        logger.exception(
            'Failed to delete media file from disk (orphaned): %s',
            storage_path,
        )
