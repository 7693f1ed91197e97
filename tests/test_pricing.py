from studio.extensions import db
from studio.models import PackageFeature, PricingPackage
from studio.services import pricing

PACKAGE = {'name': 'Essentials', 'slug': 'essentials', 'priceCents': 29900}


def test_price_is_required_and_non_negative(editor_client):
    assert editor_client.post('/api/admin/pricing', json={'name': 'X', 'slug': 'x'}).status_code == 400
    r = editor_client.post('/api/admin/pricing', json={'name': 'X', 'slug': 'x', 'priceCents': -1})
    assert r.status_code == 400


def test_features_are_nested_in_display_order(client, editor_client):
    package = editor_client.post('/api/admin/pricing', json=PACKAGE).get_json()
    assert package['features'] == []

    url = f"/api/admin/pricing/{package['id']}/features"
    assert editor_client.post(url, json={'featureText': 'Twilight shots', 'displayOrder': 2}).status_code == 201
    assert editor_client.post(url, json={'featureText': '25 photos', 'displayOrder': 1}).status_code == 201

    listed = client.get('/api/pricing').get_json()
    assert [f['featureText'] for f in listed[0]['features']] == ['25 photos', 'Twilight shots']


def test_inactive_packages_are_not_public(client, editor_client):
    editor_client.post('/api/admin/pricing', json={**PACKAGE, 'isActive': False})
    assert client.get('/api/pricing').get_json() == []
    assert len(editor_client.get('/api/admin/pricing').get_json()) == 1


def test_feature_on_missing_package_is_404(editor_client):
    r = editor_client.post('/api/admin/pricing/77/features', json={'featureText': 'x'})
    assert r.status_code == 404


def test_feature_requires_text(editor_client):
    package = editor_client.post('/api/admin/pricing', json=PACKAGE).get_json()
    r = editor_client.post(f"/api/admin/pricing/{package['id']}/features", json={'featureText': ' '})
    assert r.status_code == 400


def test_adding_feature_leaves_package_timestamp(ctx):
    package = pricing.create(PACKAGE)
    before = package.updated_at
    pricing.add_feature(package.id, {'featureText': 'Floor plan'})
    db.session.expire_all()
    assert db.session.get(PricingPackage, package.id).updated_at == before


def test_deleting_package_removes_features(ctx):
    package = pricing.create(PACKAGE)
    pricing.add_feature(package.id, {'featureText': 'One'})
    pricing.add_feature(package.id, {'featureText': 'Two'})
    other = pricing.create({'name': 'Premium', 'slug': 'premium', 'priceCents': 59900})
    pricing.add_feature(other.id, {'featureText': 'Kept'})

    assert pricing.delete(package.id) is True
    remaining = PackageFeature.query.all()
    assert [f.feature_text for f in remaining] == ['Kept']
    assert pricing.features_for(package.id) == []


def test_feature_delete_is_admin_only(admin_client, editor_client):
    package = editor_client.post('/api/admin/pricing', json=PACKAGE).get_json()
    feature = editor_client.post(f"/api/admin/pricing/{package['id']}/features",
                                 json={'featureText': 'x'}).get_json()

    url = f"/api/admin/pricing/features/{feature['id']}"
    assert editor_client.delete(url).status_code == 403
    assert admin_client.delete(url).status_code == 200
    assert admin_client.delete(url).status_code == 404
