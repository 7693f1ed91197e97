"""
Resource Repository

One CRUD implementation shared by every content type. Each type supplies a
ResourceConfig naming its model, input schema, public visibility rule,
ordering and media references.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from pydantic.alias_generators import to_camel

from studio.errors import ConflictError, ValidationError, guarded
from studio.extensions import db
from studio.models.base import utc_now_naive
from studio.schemas import normalize_keys, validate_input
from studio.services.media import resolve as resolve_media

logger = logging.getLogger(__name__)


def default_order(model):
    return (model.display_order.asc(), model.created_at.desc(), model.id.desc())


@dataclass
class ResourceConfig:
    name: str
    label: str
    model: type
    schema: type
    # Column expression selecting the publicly visible rows; None means never public
    visible: Optional[Callable] = None
    order_by: Callable = default_order
    slug_field: Optional[str] = 'slug'
    # FK column -> key of the nested media object in the JSON output
    media_fields: Dict[str, str] = field(default_factory=dict)
    # Predicate over the merged values; stamps published_at when it turns true
    is_live: Optional[Callable[[dict], bool]] = None
    author_field: Optional[str] = None


class ResourceRepository:

    def __init__(self, config):
        self.config = config

    @property
    def model(self):
        return self.config.model

    # Reads

    def get(self, record_id):
        with guarded(f'loading {self.config.name} {record_id}'):
            return db.session.get(self.model, record_id)

    def get_by_slug(self, slug, public=False):
        if self.config.slug_field is None:
            return None
        query = self.model.query.filter(getattr(self.model, self.config.slug_field) == slug)
        if public:
            query = self._public(query)
        with guarded(f'loading {self.config.name} {slug!r}'):
            return query.first()

    def list_all(self):
        with guarded(f'listing {self.config.name}'):
            return self.model.query.order_by(*self.config.order_by(self.model)).all()

    def list_public(self):
        query = self._public(self.model.query)
        with guarded(f'listing public {self.config.name}'):
            return query.order_by(*self.config.order_by(self.model)).all()

    def _public(self, query):
        if self.config.visible is None:
            return query.filter(db.false())
        return query.filter(self.config.visible(self.model))

    # Writes

    def create(self, data, author=None):
        values = validate_input(self.config.schema, data).model_dump()
        self._prepare(values, values, record=None)
        self._check_references(values)
        self._check_slug(values)
        if self.config.author_field and author is not None:
            values[self.config.author_field] = author.id

        now = utc_now_naive()
        record = self.model(**values)
        record.created_at = now
        if hasattr(self.model, 'updated_at'):
            record.updated_at = now

        with guarded(f'creating {self.config.name}'):
            db.session.add(record)
            db.session.commit()
        logger.info('Created %s %s', self.config.name, record.id)
        return record

    def update(self, record_id, data):
        """Apply only the supplied fields; returns None when the id does not exist."""
        if not isinstance(data, dict):
            raise ValidationError('Request body must be a JSON object.')
        record = self.get(record_id)
        if record is None:
            return None

        supplied = normalize_keys(self.config.schema, data)
        merged = {name: getattr(record, name) for name in self.config.schema.model_fields}
        merged.update(supplied)
        validated = validate_input(self.config.schema, merged)
        changes = {name: getattr(validated, name) for name in supplied}
        self._prepare(changes, validated.model_dump(), record=record)
        self._check_references(changes)
        self._check_slug(changes, record=record)

        for name, value in changes.items():
            setattr(record, name, value)
        if hasattr(self.model, 'updated_at'):
            record.updated_at = utc_now_naive()

        with guarded(f'updating {self.config.name} {record_id}'):
            db.session.commit()
        return record

    def delete(self, record_id):
        """Delete by id with a single statement; False when nothing matched."""
        with guarded(f'deleting {self.config.name} {record_id}'):
            result = db.session.execute(db.delete(self.model).where(self.model.id == record_id))
            db.session.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info('Deleted %s %s', self.config.name, record_id)
        return deleted

    def _prepare(self, changes, merged, record):
        """Hook for derived fields; stamps published_at on first going live."""
        if self.config.is_live is None or not self.config.is_live(merged):
            return
        current = record.published_at if record is not None else None
        if merged.get('published_at') is None and current is None:
            changes['published_at'] = utc_now_naive()

    def _check_slug(self, values, record=None):
        slug_field = self.config.slug_field
        if slug_field is None or slug_field not in values:
            return
        slug = values[slug_field]
        if record is not None and getattr(record, slug_field) == slug:
            return
        if self.get_by_slug(slug) is not None:
            raise ConflictError(f'A {self.config.label.lower()} with slug "{slug}" already exists.')

    def _check_references(self, values):
        missing = []
        for column in self.config.media_fields:
            media_id = values.get(column)
            if media_id is not None and resolve_media(media_id) is None:
                missing.append({'field': to_camel(column), 'message': f'Media {media_id} does not exist.'})
        if missing:
            raise ValidationError(details=missing)

    # Output

    def serialize(self, record):
        data = record.to_dict()
        for column, key in self.config.media_fields.items():
            media = resolve_media(getattr(record, column))
            data[key] = media.to_dict() if media is not None else None
        return data

    def serialize_many(self, records):
        return [self.serialize(record) for record in records]
