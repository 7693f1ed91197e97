"""
Content Models

Public site content managed through the admin API. Media references use
ON DELETE SET NULL so removing an upload never removes the content using it.
"""

from studio.extensions import db
from studio.models.base import SerializerMixin, utc_now_naive

BLOG_DRAFT = 'draft'
BLOG_PUBLISHED = 'published'
BLOG_ARCHIVED = 'archived'
BLOG_STATUSES = (BLOG_DRAFT, BLOG_PUBLISHED, BLOG_ARCHIVED)


def _media_fk():
    return db.ForeignKey('media.id', ondelete='SET NULL')


class GalleryItem(SerializerMixin, db.Model):
    """Portfolio image shown in the public gallery"""
    __tablename__ = 'gallery_items'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    category = db.Column(db.String(100))
    description = db.Column(db.Text)
    featured = db.Column(db.Boolean, nullable=False, default=False)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    media_id = db.Column(db.Integer, _media_fk())
    is_published = db.Column(db.Boolean, nullable=False, default=True, index=True)
    published_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)

    def __repr__(self):
        return f'<GalleryItem {self.slug}>'


class Service(SerializerMixin, db.Model):
    """Photography service offered by the studio"""
    __tablename__ = 'services'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    short_description = db.Column(db.String(500))
    full_description = db.Column(db.Text)
    base_price_cents = db.Column(db.Integer)
    image_id = db.Column(db.Integer, _media_fk())
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)

    def __repr__(self):
        return f'<Service {self.slug}>'


class PricingPackage(SerializerMixin, db.Model):
    """Bookable package; owns its feature bullet points"""
    __tablename__ = 'pricing_packages'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    description = db.Column(db.String(500))
    price_cents = db.Column(db.Integer, nullable=False)
    stripe_price_id = db.Column(db.String(255))
    stripe_product_id = db.Column(db.String(255))
    is_popular = db.Column(db.Boolean, nullable=False, default=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)

    # The database removes features; the ORM must not try to null package_id
    features = db.relationship('PackageFeature', backref='package', lazy=True,
                               passive_deletes=True)

    def __repr__(self):
        return f'<PricingPackage {self.slug}>'


class PackageFeature(SerializerMixin, db.Model):
    __tablename__ = 'package_features'

    id = db.Column(db.Integer, primary_key=True)
    package_id = db.Column(db.Integer, db.ForeignKey('pricing_packages.id', ondelete='CASCADE'),
                           nullable=False, index=True)
    feature_text = db.Column(db.String(500), nullable=False)
    display_order = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f'<PackageFeature package:{self.package_id} {self.feature_text!r}>'


class Faq(SerializerMixin, db.Model):
    __tablename__ = 'faqs'

    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.String(500), nullable=False)
    answer = db.Column(db.Text, nullable=False)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    is_published = db.Column(db.Boolean, nullable=False, default=True, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)

    def __repr__(self):
        return f'<Faq {self.id}>'


class BlogPost(SerializerMixin, db.Model):
    __tablename__ = 'blog_posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    excerpt = db.Column(db.String(500))
    content = db.Column(db.Text, nullable=False)
    cover_image_id = db.Column(db.Integer, _media_fk())
    status = db.Column(db.String(20), nullable=False, default=BLOG_DRAFT, index=True)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'))
    published_at = db.Column(db.DateTime, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)

    def __repr__(self):
        return f'<BlogPost {self.slug} ({self.status})>'


class Testimonial(SerializerMixin, db.Model):
    __tablename__ = 'testimonials'

    id = db.Column(db.Integer, primary_key=True)
    client_name = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(255))
    company = db.Column(db.String(255))
    quote = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer)
    location = db.Column(db.String(255))
    avatar_id = db.Column(db.Integer, _media_fk())
    display_order = db.Column(db.Integer, nullable=False, default=0)
    is_published = db.Column(db.Boolean, nullable=False, default=True, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)
    updated_at = db.Column(db.DateTime, nullable=False, default=utc_now_naive)

    def __repr__(self):
        return f'<Testimonial {self.client_name}>'
