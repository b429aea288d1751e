"""Django app configuration for media app."""

from typing import override

from django.apps import AppConfig


class MediaConfig(AppConfig):
    """Configuration for media app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.media'
    label = 'media'
    verbose_name = 'Media'

    @override
    def ready(self) -> None:
        """Import signal handlers when app is ready."""
        from server.apps.media import signals  # noqa: F401
