"""
Content collections managed through the admin API.
"""

from studio.models import BlogPost, Faq, GalleryItem, Service, Testimonial
from studio.models.content import BLOG_PUBLISHED
from studio.schemas import (
    BlogPostInput, FaqInput, GalleryItemInput, ServiceInput, TestimonialInput,
)
from studio.services.pricing import pricing
from studio.services.repository import ResourceConfig, ResourceRepository

gallery = ResourceRepository(ResourceConfig(
    name='gallery',
    label='Gallery item',
    model=GalleryItem,
    schema=GalleryItemInput,
    visible=lambda m: m.is_published.is_(True),
    media_fields={'media_id': 'media'},
    is_live=lambda values: values['is_published'],
))

services = ResourceRepository(ResourceConfig(
    name='services',
    label='Service',
    model=Service,
    schema=ServiceInput,
    visible=lambda m: m.is_active.is_(True),
    media_fields={'image_id': 'image'},
))

faqs = ResourceRepository(ResourceConfig(
    name='faqs',
    label='FAQ',
    model=Faq,
    schema=FaqInput,
    visible=lambda m: m.is_published.is_(True),
    slug_field=None,
))

blog = ResourceRepository(ResourceConfig(
    name='blog',
    label='Blog post',
    model=BlogPost,
    schema=BlogPostInput,
    visible=lambda m: m.status == BLOG_PUBLISHED,
    order_by=lambda m: (m.published_at.desc().nulls_last(), m.created_at.desc(), m.id.desc()),
    media_fields={'cover_image_id': 'coverImage'},
    is_live=lambda values: values['status'] == BLOG_PUBLISHED,
    author_field='author_id',
))

testimonials = ResourceRepository(ResourceConfig(
    name='testimonials',
    label='Testimonial',
    model=Testimonial,
    schema=TestimonialInput,
    visible=lambda m: m.is_published.is_(True),
    slug_field=None,
    media_fields={'avatar_id': 'avatar'},
))

# Collection name -> repository, shared by the public and admin blueprints
COLLECTIONS = {
    repo.config.name: repo
    for repo in (gallery, services, pricing, faqs, blog, testimonials)
}
