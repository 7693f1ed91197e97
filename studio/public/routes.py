"""
Public Routes

Published / active content only; hidden records never leave through here.
"""

from flask import current_app, jsonify, request, send_from_directory

from studio.errors import NotFound
from studio.public import public_bp
from studio.services import COLLECTIONS, blog, contact


def _public_list(name):
    repo = COLLECTIONS[name]

    def view():
        return jsonify(repo.serialize_many(repo.list_public()))

    view.__name__ = f'list_{name}'
    view.__doc__ = f'Public listing of {name}.'
    return view


for _name in COLLECTIONS:
    public_bp.add_url_rule(f'/api/{_name}', view_func=_public_list(_name), methods=['GET'])


@public_bp.route('/api/blog/<slug>')
def get_blog_post(slug):
    """A single published post; drafts and archived posts are not found."""
    post = blog.get_by_slug(slug, public=True)
    if post is None:
        raise NotFound('Blog post not found.')
    return jsonify(blog.serialize(post))


@public_bp.route('/api/contact', methods=['POST'])
def submit_contact():
    submission = contact.submit(request.get_json(silent=True))
    return jsonify({'message': 'Contact form submitted successfully', 'id': submission.id}), 201


@public_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
