"""
Media Service

Resolves media references held by content records and stores uploaded images
on local disk.
"""

import logging
import os
import time
import uuid

from flask import current_app
from werkzeug.utils import secure_filename

from studio.errors import PayloadTooLarge, StudioError, ValidationError, guarded
from studio.extensions import db
from studio.models import Media

logger = logging.getLogger(__name__)


def resolve(media_id):
    """Return the Media row for an id, or None for a missing or dangling reference."""
    if media_id is None:
        return None
    return db.session.get(Media, media_id)


def list_media():
    return Media.query.order_by(Media.created_at.desc(), Media.id.desc()).all()


def _file_size(file_storage):
    stream = file_storage.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def store_upload(file_storage, uploader=None, alt_text=None):
    """Validate and save an uploaded image, returning its Media record."""
    if file_storage is None or not file_storage.filename:
        raise ValidationError('No file uploaded.')

    mimetype = file_storage.mimetype
    if mimetype not in current_app.config['ALLOWED_UPLOAD_MIMETYPES']:
        logger.warning('Rejected upload %r with type %s', file_storage.filename, mimetype)
        raise ValidationError('Invalid file type. Only JPEG, PNG, GIF, WEBP, and SVG are allowed.')

    size = _file_size(file_storage)
    limit = current_app.config['MAX_UPLOAD_BYTES']
    if size > limit:
        logger.warning('Rejected upload %r of %d bytes', file_storage.filename, size)
        raise PayloadTooLarge(f'File exceeds the {limit // (1024 * 1024)} MB limit.')

    original = secure_filename(file_storage.filename) or 'upload'
    extension = os.path.splitext(original)[1].lower()
    filename = f'{int(time.time() * 1000)}-{uuid.uuid4()}{extension}'

    folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(folder, exist_ok=True)
    path = os.path.join(folder, filename)
    file_storage.save(path)

    media = Media(
        filename=filename,
        original_filename=file_storage.filename,
        url=f'/uploads/{filename}',
        alt_text=alt_text or '',
        size_bytes=size,
        mime_type=mimetype,
        uploaded_by=uploader.id if uploader is not None else None,
        storage_provider='local',
    )
    try:
        with guarded(f'saving media {filename}'):
            db.session.add(media)
            db.session.commit()
    except StudioError:
        _remove_file(path)
        raise
    logger.info('Stored upload %s (%d bytes)', filename, size)
    return media


def delete_media(media_id):
    """Remove a media row; content referencing it keeps a null reference."""
    media = resolve(media_id)
    if media is None:
        return False
    path = os.path.join(current_app.config['UPLOAD_FOLDER'], media.filename)
    with guarded(f'deleting media {media_id}'):
        db.session.delete(media)
        db.session.commit()
    _remove_file(path)
    return True


def _remove_file(path):
    try:
        os.remove(path)
    except OSError as e:
        logger.debug('Could not remove %s: %s', path, e)
