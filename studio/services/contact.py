"""
Contact Intake

Public contact-form submissions and their follow-up status. Any status may
be set from any other.
"""

import logging

from studio.errors import guarded
from studio.extensions import db
from studio.models import ContactSubmission
from studio.models.base import utc_now_naive
from studio.models.contact import CONTACT_NEW, CONTACT_RESPONDED
from studio.schemas import ContactSubmissionInput, ContactUpdateInput, validate_input
from studio.services.repository import ResourceConfig, ResourceRepository

logger = logging.getLogger(__name__)


class ContactIntake(ResourceRepository):

    def submit(self, data):
        """Record a public submission; it always starts as ``new``."""
        values = validate_input(ContactSubmissionInput, data).model_dump()
        submission = ContactSubmission(status=CONTACT_NEW, created_at=utc_now_naive(), **values)
        with guarded('saving contact submission'):
            db.session.add(submission)
            db.session.commit()
        logger.info('Contact submission %s received', submission.id)
        return submission

    def create(self, data, author=None):
        return self.submit(data)

    def update_status(self, submission_id, status):
        return self.update(submission_id, {'status': status})

    def _prepare(self, changes, merged, record):
        if changes.get('status') == CONTACT_RESPONDED and record.responded_at is None:
            changes['responded_at'] = utc_now_naive()


contact = ContactIntake(ResourceConfig(
    name='contact',
    label='Contact submission',
    model=ContactSubmission,
    schema=ContactUpdateInput,
    order_by=lambda m: (m.created_at.desc(), m.id.desc()),
    slug_field=None,
))
