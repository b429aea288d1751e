"""Django settings for the media server.

Settings are split into components and assembled with
``django-split-settings``. Values that differ between environments
are read from the environment (or ``config/.env``) with
``python-decouple``.
"""

import django_stubs_ext
from split_settings.tools import include

# Allows generic admin classes such as ``admin.ModelAdmin[Media]`` at runtime
django_stubs_ext.monkeypatch()

include(
    'components/common.py',
    'components/logging.py',
    'components/storages.py',
    'components/media.py',
)
