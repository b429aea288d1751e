"""Django admin configuration for media app."""

from django.contrib import admin

from server.apps.media.models import Media


def _format_bytes(size_bytes: int) -> str:
    """Format bytes in human-readable format.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Formatted size string (e.g., '1.5 MB', '234 KB').
    """
    if size_bytes < 1024:
        return f'{size_bytes} B'
    if size_bytes < 1024 * 1024:  # noqa: WPS531
        return f'{size_bytes / 1024:.1f} KB'
    if size_bytes < 1024 * 1024 * 1024:  # noqa: WPS531
        return f'{size_bytes / (1024 * 1024):.1f} MB'
    return f'{size_bytes / (1024 * 1024 * 1024):.1f} GB'


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin[Media]):
    """Admin interface for Media model."""

    list_display = [
        'name',
        'file_name',
        'disk',
        'mime_type',
        'size_display',
        'created_at',
    ]

    list_filter = [
        'disk',
        'mime_type',
        'created_at',
    ]

    search_fields = [
        'name',
        'file_name',
    ]

    readonly_fields = [
        'file_name',
        'disk',
        'mime_type',
        'size',
        'path_display',
        'created_at',
        'updated_at',
    ]

    fieldsets = (
        ('Media Information', {
            'fields': ('name', 'file_name', 'disk', 'path_display'),
        }),
        ('Metadata', {
            'fields': ('mime_type', 'size'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
        }),
    )

    def size_display(self, obj: Media) -> str:
        """Display file size in human-readable format.

        Args:
            obj: Media instance.

        Returns:
            Formatted size string.
        """
        return _format_bytes(obj.size)
    size_display.short_description = 'Size'  # type: ignore[attr-defined]

    def path_display(self, obj: Media) -> str:
        """Display storage path on the disk.

        Args:
            obj: Media instance.

        Returns:
            Path relative to the disk root.
        """
        return obj.get_path()
    path_display.short_description = 'Path'  # type: ignore[attr-defined]
