"""
Contact Submission Model
"""

from studio.extensions import db
from studio.models.base import SerializerMixin, utc_now_naive

CONTACT_NEW = 'new'
CONTACT_IN_PROGRESS = 'in_progress'
CONTACT_RESPONDED = 'responded'
CONTACT_CLOSED = 'closed'
CONTACT_STATUSES = (CONTACT_NEW, CONTACT_IN_PROGRESS, CONTACT_RESPONDED, CONTACT_CLOSED)


class ContactSubmission(SerializerMixin, db.Model):
    """Inbound enquiry from the public contact form"""
    __tablename__ = 'contact_submissions'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50))
    service_interest = db.Column(db.String(255))
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=CONTACT_NEW, index=True)
    internal_notes = db.Column(db.Text)
    responded_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)

    def __repr__(self):
        return f'<ContactSubmission {self.email} ({self.status})>'
