"""
Services Package

Exports all services for easy importing.
"""

from studio.services.repository import ResourceConfig, ResourceRepository
from studio.services.resources import (
    COLLECTIONS, blog, faqs, gallery, services, testimonials,
)
from studio.services.pricing import pricing
from studio.services.contact import contact

__all__ = [
    'ResourceConfig',
    'ResourceRepository',
    'COLLECTIONS',
    'gallery',
    'services',
    'pricing',
    'faqs',
    'blog',
    'testimonials',
    'contact',
]
