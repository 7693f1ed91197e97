"""
Media Routes
"""

from flask import jsonify, request
from flask_login import current_user

from studio.auth.decorators import admin_required, editor_required
from studio.errors import NotFound
from studio.media import media_bp
from studio.services import media as media_service


@media_bp.route('', methods=['POST'])
@editor_required
def upload_media():
    """Upload an image (multipart field ``file``, optional ``altText``)."""
    media = media_service.store_upload(
        request.files.get('file'),
        uploader=current_user,
        alt_text=request.form.get('altText'),
    )
    return jsonify(media.to_dict()), 201


@media_bp.route('', methods=['GET'])
@editor_required
def list_media():
    return jsonify([media.to_dict() for media in media_service.list_media()])


@media_bp.route('/<int:media_id>')
@editor_required
def get_media(media_id):
    media = media_service.resolve(media_id)
    if media is None:
        raise NotFound('Media not found.')
    return jsonify(media.to_dict())


@media_bp.route('/<int:media_id>', methods=['DELETE'])
@admin_required
def delete_media(media_id):
    if not media_service.delete_media(media_id):
        raise NotFound('Media not found.')
    return jsonify({'message': 'Media deleted successfully'})
