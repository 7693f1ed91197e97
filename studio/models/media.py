"""
Media Model
"""

from studio.extensions import db
from studio.models.base import SerializerMixin, utc_now_naive


class Media(SerializerMixin, db.Model):
    """Uploaded image referenced (not owned) by content records"""
    __tablename__ = 'media'

    id = db.Column(db.Integer, primary_key=True)
    filename = db.Column(db.String(255), nullable=False)
    original_filename = db.Column(db.String(255), nullable=False)
    storage_provider = db.Column(db.String(20), nullable=False, default='local')
    url = db.Column(db.Text, nullable=False)
    alt_text = db.Column(db.String(500))
    width = db.Column(db.Integer)
    height = db.Column(db.Integer)
    size_bytes = db.Column(db.Integer)
    mime_type = db.Column(db.String(100))
    uploaded_by = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'))
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)

    def __repr__(self):
        return f'<Media {self.original_filename}>'
