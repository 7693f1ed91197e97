def _seed(editor_client):
    editor_client.post('/api/admin/gallery', json={'title': 'Shown', 'slug': 'shown'})
    editor_client.post('/api/admin/gallery', json={'title': 'Hidden', 'slug': 'hidden', 'isPublished': False})
    editor_client.post('/api/admin/services', json={'title': 'Off', 'slug': 'off', 'isActive': False})
    editor_client.post('/api/admin/testimonials', json={'clientName': 'Ann', 'quote': 'Lovely', 'rating': 5})
    editor_client.post('/api/admin/blog', json={'title': 'Draft', 'slug': 'draft', 'content': 'x'})
    editor_client.post('/api/admin/blog', json={
        'title': 'Live', 'slug': 'live', 'content': 'x', 'status': 'published',
    })


def test_public_lists_need_no_session(client):
    for name in ('gallery', 'services', 'pricing', 'faqs', 'blog', 'testimonials'):
        r = client.get(f'/api/{name}')
        assert r.status_code == 200, name
        assert r.get_json() == []


def test_public_lists_hide_unpublished(client, editor_client):
    _seed(editor_client)
    assert [g['slug'] for g in client.get('/api/gallery').get_json()] == ['shown']
    assert client.get('/api/services').get_json() == []
    assert [t['clientName'] for t in client.get('/api/testimonials').get_json()] == ['Ann']
    assert [p['slug'] for p in client.get('/api/blog').get_json()] == ['live']


def test_published_post_by_slug(client, editor_client):
    _seed(editor_client)
    r = client.get('/api/blog/live')
    assert r.status_code == 200
    post = r.get_json()
    assert post['title'] == 'Live'
    assert post['publishedAt'] is not None
    assert post['coverImage'] is None


def test_draft_post_by_slug_is_not_found(client, editor_client):
    _seed(editor_client)
    assert client.get('/api/blog/draft').status_code == 404
    assert client.get('/api/blog/missing').status_code == 404


def test_public_routes_are_read_only(client):
    assert client.post('/api/gallery', json={}).status_code == 405


def test_viewer_may_use_public_routes(viewer_client):
    for name in ('gallery', 'services', 'pricing', 'faqs', 'blog', 'testimonials'):
        assert viewer_client.get(f'/api/{name}').status_code == 200
    r = viewer_client.post('/api/contact', json={'name': 'V', 'email': 'v@x.com', 'message': 'Hi'})
    assert r.status_code == 201
