"""
Error taxonomy and JSON error handlers.

Every error response has the shape ``{code, message, details?}``.
"""

import logging
from contextlib import contextmanager

from flask import jsonify, request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException

from studio.extensions import db

logger = logging.getLogger(__name__)


class StudioError(Exception):
    """Base class for errors that map onto an HTTP response."""
    status_code = 500
    code = 'INTERNAL_ERROR'
    message = 'An unexpected error occurred.'

    def __init__(self, message=None, details=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.details = details

    def to_dict(self):
        body = {'code': self.code, 'message': self.message}
        if self.details:
            body['details'] = self.details
        return body


class ValidationError(StudioError):
    status_code = 400
    code = 'VALIDATION_ERROR'
    message = 'Invalid input.'


class Unauthenticated(StudioError):
    status_code = 401
    code = 'UNAUTHENTICATED'
    message = 'Authentication required.'


class InvalidCredentials(Unauthenticated):
    code = 'INVALID_CREDENTIALS'
    message = 'Invalid username or password.'


class Forbidden(StudioError):
    status_code = 403
    code = 'FORBIDDEN'
    message = 'You do not have permission to perform this action.'


class NotFound(StudioError):
    status_code = 404
    code = 'NOT_FOUND'
    message = 'Resource not found.'


class ConflictError(StudioError):
    status_code = 409
    code = 'CONFLICT'
    message = 'Resource already exists.'


class PayloadTooLarge(StudioError):
    status_code = 413
    code = 'PAYLOAD_TOO_LARGE'
    message = 'Uploaded file is too large.'


class StorageError(StudioError):
    """Unexpected backend failure; detail stays in the server log."""
    status_code = 500
    code = 'STORAGE_ERROR'
    message = 'A storage error occurred. Please try again later.'


@contextmanager
def guarded(action):
    """Roll back and translate database failures raised inside the block."""
    try:
        yield
    except IntegrityError as exc:
        db.session.rollback()
        logger.warning('Integrity error while %s: %s', action, exc.orig)
        raise ConflictError() from exc
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception('Storage failure while %s', action)
        raise StorageError() from exc


def register_error_handlers(app):
    """Attach JSON error handlers to the application."""

    @app.errorhandler(StudioError)
    def handle_studio_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        if not request.path.startswith('/api'):
            return exc
        if exc.code == 413:
            return jsonify(PayloadTooLarge().to_dict()), 413
        body = {
            'code': (exc.name or 'HTTP_ERROR').upper().replace(' ', '_'),
            'message': exc.description or exc.name,
        }
        return jsonify(body), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        logger.exception('Unhandled error on %s %s', request.method, request.path)
        return jsonify(StudioError().to_dict()), 500
