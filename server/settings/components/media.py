"""Media uploader defaults."""

from server.settings.components import config

# Model used for new media records, as ``app_label.ModelName``
MEDIA_UPLOADER_MODEL = config('MEDIA_UPLOADER_MODEL', default='media.Media')

# Storage alias (a key of STORAGES) that uploads are written to
MEDIA_UPLOADER_DISK = config('MEDIA_UPLOADER_DISK', default='default')
