"""
Models Package

Exports all models for easy importing.
"""

from studio.models.user import Role, User, UserSession
from studio.models.media import Media
from studio.models.content import (
    GalleryItem, Service, PricingPackage, PackageFeature, Faq, BlogPost, Testimonial,
)
from studio.models.contact import ContactSubmission

__all__ = [
    'Role', 'User', 'UserSession', 'Media',
    'GalleryItem', 'Service', 'PricingPackage', 'PackageFeature',
    'Faq', 'BlogPost', 'Testimonial', 'ContactSubmission',
]
