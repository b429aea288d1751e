"""Metadata extraction utilities for media files."""

import mimetypes
from pathlib import PurePath
from typing import Final

_UNSAFE_CHARACTERS: Final = ('#', '/', '\\', ' ')
_REPLACEMENT: Final = '-'
_DEFAULT_MIME_TYPE: Final = 'application/octet-stream'


def sanitise_file_name(file_name: str) -> str:
    """Replace characters that are unsafe in storage keys.

    Hashes, forward and back slashes and spaces each become a dash.

    Args:
        file_name: File name as supplied by the caller or client.

    Returns:
        Sanitised file name (e.g., 'my file#1.txt' -> 'my-file-1.txt').
    """
    for character in _UNSAFE_CHARACTERS:
        file_name = file_name.replace(character, _REPLACEMENT)
    return file_name


def detect_mime_type(file_name: str) -> str:
    """Detect MIME type from file name.

    Uses Python's built-in mimetypes module to guess MIME type
    from the file name extension. File contents are not inspected:
    a file without an extension, or with a misleading one, is typed
    by its name alone.

    Args:
        file_name: File name with extension.

    Returns:
        MIME type string (e.g., 'image/jpeg', 'text/plain').
        Returns 'application/octet-stream' if type cannot be determined.
    """
    mime_type, _ = mimetypes.guess_type(file_name)
    if mime_type is None:
        return _DEFAULT_MIME_TYPE
    return mime_type


def extract_name(file_name: str) -> str:
    """Get file name without its last extension.

    Args:
        file_name: File name or path (e.g., 'docs/report.final.pdf').

    Returns:
        Name without extension (e.g., 'report.final').
    """
    return PurePath(file_name).stem


def get_file_extension(file_name: str) -> str:
    """Get file extension from file name.

    Args:
        file_name: File name (e.g., 'document.pdf').

    Returns:
        Extension without dot, lowercase (e.g., 'pdf').
        Returns empty string if no extension.
    """
    extension = PurePath(file_name).suffix
    return extension.lstrip('.').lower()
