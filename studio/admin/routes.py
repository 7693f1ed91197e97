"""
Admin Routes

Every content collection gets the same five endpoints, generated from its
repository:

    GET    /<collection>        list everything, hidden records included
    GET    /<collection>/<id>   one record
    POST   /<collection>        create
    PATCH  /<collection>/<id>   partial update
    DELETE /<collection>/<id>   delete (admin only)

Missing ids answer 404 for reads, updates and deletes alike.
"""

import logging

from flask import jsonify, request
from flask_login import current_user

from studio.admin import admin_bp
from studio.auth.decorators import admin_required, editor_required
from studio.errors import NotFound
from studio.models import ContactSubmission
from studio.models.contact import CONTACT_NEW
from studio.schemas import RoleInput, validate_input
from studio.services import COLLECTIONS, contact, pricing
from studio.services import credentials

logger = logging.getLogger(__name__)


def _not_found(repo):
    return NotFound(f'{repo.config.label} not found.')


def register_collection(bp, repo):
    """Add the list/get/create/update/delete endpoints for one repository."""
    name = repo.config.name

    @editor_required
    def list_records():
        return jsonify(repo.serialize_many(repo.list_all()))

    @editor_required
    def get_record(record_id):
        record = repo.get(record_id)
        if record is None:
            raise _not_found(repo)
        return jsonify(repo.serialize(record))

    @editor_required
    def create_record():
        record = repo.create(request.get_json(silent=True), author=current_user)
        return jsonify(repo.serialize(record)), 201

    @editor_required
    def update_record(record_id):
        record = repo.update(record_id, request.get_json(silent=True))
        if record is None:
            raise _not_found(repo)
        return jsonify(repo.serialize(record))

    @admin_required
    def delete_record(record_id):
        if not repo.delete(record_id):
            raise _not_found(repo)
        return jsonify({'message': f'{repo.config.label} deleted successfully'})

    bp.add_url_rule(f'/{name}', f'list_{name}', list_records, methods=['GET'])
    bp.add_url_rule(f'/{name}', f'create_{name}', create_record, methods=['POST'])
    bp.add_url_rule(f'/{name}/<int:record_id>', f'get_{name}', get_record, methods=['GET'])
    bp.add_url_rule(f'/{name}/<int:record_id>', f'update_{name}', update_record, methods=['PATCH'])
    bp.add_url_rule(f'/{name}/<int:record_id>', f'delete_{name}', delete_record, methods=['DELETE'])


for _repo in COLLECTIONS.values():
    register_collection(admin_bp, _repo)


# -----------------------------------------------------------------------------
# Pricing package features
# -----------------------------------------------------------------------------

@admin_bp.route('/pricing/<int:package_id>/features', methods=['POST'])
@editor_required
def add_package_feature(package_id):
    feature = pricing.add_feature(package_id, request.get_json(silent=True))
    return jsonify(feature.to_dict()), 201


@admin_bp.route('/pricing/features/<int:feature_id>', methods=['DELETE'])
@admin_required
def delete_package_feature(feature_id):
    if not pricing.delete_feature(feature_id):
        raise NotFound('Package feature not found.')
    return jsonify({'message': 'Package feature deleted successfully'})


# -----------------------------------------------------------------------------
# Contact submissions (created publicly, managed here)
# -----------------------------------------------------------------------------

@admin_bp.route('/contact')
@editor_required
def list_contact_submissions():
    return jsonify(contact.serialize_many(contact.list_all()))


@admin_bp.route('/contact/<int:submission_id>')
@editor_required
def get_contact_submission(submission_id):
    submission = contact.get(submission_id)
    if submission is None:
        raise _not_found(contact)
    return jsonify(contact.serialize(submission))


@admin_bp.route('/contact/<int:submission_id>', methods=['PATCH'])
@editor_required
def update_contact_submission(submission_id):
    """Update status and/or internal notes."""
    submission = contact.update(submission_id, request.get_json(silent=True))
    if submission is None:
        raise _not_found(contact)
    return jsonify(contact.serialize(submission))


@admin_bp.route('/contact/<int:submission_id>', methods=['DELETE'])
@admin_required
def delete_contact_submission(submission_id):
    if not contact.delete(submission_id):
        raise _not_found(contact)
    return jsonify({'message': 'Contact submission deleted successfully'})


# -----------------------------------------------------------------------------
# Users and overview
# -----------------------------------------------------------------------------

@admin_bp.route('/users')
@admin_required
def list_users():
    return jsonify([user.to_dict() for user in credentials.list_users()])


@admin_bp.route('/users/<int:user_id>/role', methods=['PATCH'])
@admin_required
def update_user_role(user_id):
    data = validate_input(RoleInput, request.get_json(silent=True))
    user = credentials.set_role(user_id, data.role)
    return jsonify(user.to_dict())


@admin_bp.route('/dashboard')
@editor_required
def admin_dashboard():
    """Counts shown on the admin landing page."""
    totals = {name: repo.model.query.count() for name, repo in COLLECTIONS.items()}
    totals['newContactSubmissions'] = ContactSubmission.query.filter_by(status=CONTACT_NEW).count()
    return jsonify(totals)
