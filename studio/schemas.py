"""
Request Schemas

Pydantic models validating admin and public JSON input. Keys are accepted in
camelCase (as sent by the admin UI) or snake_case; strings are stripped.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from studio.errors import ValidationError
from studio.models.contact import CONTACT_STATUSES
from studio.models.content import BLOG_STATUSES
from studio.models.user import Role

SLUG_PATTERN = r'^[a-z0-9]+(?:-[a-z0-9]+)*$'

Text255 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Text500 = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
LongText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Slug = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255, pattern=SLUG_PATTERN)]
Order = Annotated[int, Field(ge=0)]


class InputSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra='ignore',
    )


class GalleryItemInput(InputSchema):
    title: Text255
    slug: Slug
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    featured: bool = False
    display_order: Order = 0
    media_id: Optional[int] = None
    is_published: bool = True
    published_at: Optional[datetime] = None


class ServiceInput(InputSchema):
    title: Text255
    slug: Slug
    short_description: Optional[str] = Field(None, max_length=500)
    full_description: Optional[str] = None
    base_price_cents: Optional[Annotated[int, Field(ge=0)]] = None
    image_id: Optional[int] = None
    is_active: bool = True
    display_order: Order = 0


class PricingPackageInput(InputSchema):
    name: Text255
    slug: Slug
    description: Optional[str] = Field(None, max_length=500)
    price_cents: Annotated[int, Field(ge=0)]
    stripe_price_id: Optional[str] = Field(None, max_length=255)
    stripe_product_id: Optional[str] = Field(None, max_length=255)
    is_popular: bool = False
    is_active: bool = True
    display_order: Order = 0


class PackageFeatureInput(InputSchema):
    feature_text: Text500
    display_order: Order = 0


class FaqInput(InputSchema):
    question: Text500
    answer: LongText
    display_order: Order = 0
    is_published: bool = True


class BlogPostInput(InputSchema):
    title: Text255
    slug: Slug
    excerpt: Optional[str] = Field(None, max_length=500)
    content: LongText
    cover_image_id: Optional[int] = None
    status: Literal[BLOG_STATUSES] = 'draft'
    published_at: Optional[datetime] = None


class TestimonialInput(InputSchema):
    client_name: Text255
    role: Optional[str] = Field(None, max_length=255)
    company: Optional[str] = Field(None, max_length=255)
    quote: LongText
    rating: Optional[Annotated[int, Field(ge=1, le=5)]] = None
    location: Optional[str] = Field(None, max_length=255)
    avatar_id: Optional[int] = None
    display_order: Order = 0
    is_published: bool = True


class ContactSubmissionInput(InputSchema):
    name: Text255
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    service_interest: Optional[str] = Field(None, max_length=255)
    message: LongText


class ContactUpdateInput(InputSchema):
    status: Literal[CONTACT_STATUSES] = 'new'
    internal_notes: Optional[str] = None


class LoginInput(InputSchema):
    # Passwords are compared verbatim
    model_config = ConfigDict(str_strip_whitespace=False)

    username: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    password: Annotated[str, StringConstraints(min_length=1)]


class RoleInput(InputSchema):
    role: Role


def normalize_keys(schema, payload):
    """Map camelCase or snake_case keys onto field names, dropping unknown keys."""
    lookup = {}
    for name, field in schema.model_fields.items():
        lookup[name] = name
        lookup[field.alias or name] = name
    return {lookup[key]: value for key, value in payload.items() if key in lookup}


def validate_input(schema, payload):
    """Validate a JSON payload, raising the API ValidationError on failure."""
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object.')
    try:
        return schema.model_validate(normalize_keys(schema, payload))
    except PydanticValidationError as exc:
        raise ValidationError(details=format_errors(schema, exc)) from exc


def format_errors(schema, exc):
    """One ``{field, message}`` entry per failure, fields named as the client sends them."""
    details = []
    for error in exc.errors():
        loc = error.get('loc') or ()
        field = None
        if loc:
            field = str(loc[0])
            if field in schema.model_fields:
                field = schema.model_fields[field].alias or field
        details.append({'field': field, 'message': error.get('msg')})
    return details
