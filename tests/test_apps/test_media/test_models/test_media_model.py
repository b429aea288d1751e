"""Tests for Media model."""

import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import storages

from server.apps.media.models import Media


def _create_media(**fields) -> Media:
    defaults = {
        'name': 'report',
        'file_name': 'report.PDF',
        'disk': 'local',
        'mime_type': 'application/pdf',
        'size': 100,
    }
    defaults.update(fields)
    return Media.objects.create(**defaults)


@pytest.mark.django_db
def test_media_model_str():
    """Test Media __str__ method."""
    media = _create_media()

    assert str(media) == 'local:report'


@pytest.mark.django_db
def test_media_get_directory_and_path():
    """Test the storage path is the primary key plus file name."""
    media = _create_media()

    assert media.get_directory() == str(media.pk)
    assert media.get_path() == f'{media.pk}/report.PDF'


@pytest.mark.django_db
def test_media_get_extension():
    """Test get_extension returns lowercase extension."""
    media = _create_media()

    assert media.get_extension() == 'pdf'


@pytest.mark.django_db
def test_media_get_type():
    """Test get_type returns the top-level MIME type."""
    media = _create_media(file_name='photo.jpg', mime_type='image/jpeg')

    assert media.get_type() == 'image'
    assert media.is_of_type('image')
    assert not media.is_of_type('video')


@pytest.mark.django_db
def test_media_filesystem():
    """Test filesystem resolves the record's disk."""
    media = _create_media()

    assert media.filesystem() is storages['local']


@pytest.mark.django_db
def test_media_get_url_local():
    """Test get_url uses the disk's base URL."""
    media = _create_media()

    assert media.get_url() == f'/media/{media.pk}/report.PDF'


@pytest.mark.django_db
def test_media_get_url_s3(mock_s3):
    """Test get_url on an S3 disk points at the object key."""
    media = _create_media(disk='default')

    assert media.get_path() in media.get_url()


@pytest.mark.django_db
def test_delete_media_removes_file():
    """Test deleting a record deletes its file from the disk."""
    media = _create_media(file_name='notes.txt', mime_type='text/plain')
    storage = media.filesystem()
    storage_path = media.get_path()
    storage.save(storage_path, ContentFile(b'notes'))

    media.delete()

    assert not storage.exists(storage_path)


@pytest.mark.django_db
def test_delete_media_without_file(caplog):
    """Test deleting a record whose file is gone only logs a warning."""
    media = _create_media(file_name='missing.txt')

    media.delete()

    assert 'not found on disk' in caplog.text
