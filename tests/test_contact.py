import pytest

from studio.errors import ValidationError
from studio.services import contact

JANE = {
    'name': 'Jane',
    'email': 'jane@x.com',
    'phone': '555-0100',
    'serviceInterest': 'Real estate',
    'message': 'Do you shoot twilight exteriors?',
}


def test_submission_is_stored_as_new(client, editor_client):
    r = client.post('/api/contact', json=JANE)
    assert r.status_code == 201
    body = r.get_json()
    assert body['message'] == 'Contact form submitted successfully'

    stored = editor_client.get(f"/api/admin/contact/{body['id']}").get_json()
    assert stored['status'] == 'new'
    assert stored['email'] == 'jane@x.com'
    assert stored['serviceInterest'] == 'Real estate'
    assert stored['respondedAt'] is None


def test_client_cannot_choose_status(ctx):
    submission = contact.submit({**JANE, 'status': 'closed', 'internalNotes': 'sneaky'})
    assert submission.status == 'new'
    assert submission.internal_notes is None


@pytest.mark.parametrize('change', [
    {'email': 'not-an-email'},
    {'name': ''},
    {'message': '   '},
])
def test_invalid_submission_is_rejected(client, change):
    r = client.post('/api/contact', json={**JANE, **change})
    assert r.status_code == 400
    assert r.get_json()['code'] == 'VALIDATION_ERROR'


def test_missing_body_is_rejected(client):
    assert client.post('/api/contact').status_code == 400


def test_responded_stamps_timestamp(client, editor_client):
    submission_id = client.post('/api/contact', json=JANE).get_json()['id']

    r = editor_client.patch(f'/api/admin/contact/{submission_id}', json={'status': 'in_progress'})
    assert r.get_json()['respondedAt'] is None

    r = editor_client.patch(f'/api/admin/contact/{submission_id}',
                            json={'status': 'responded', 'internalNotes': 'Sent quote'})
    assert r.status_code == 200
    body = r.get_json()
    assert body['status'] == 'responded'
    assert body['internalNotes'] == 'Sent quote'
    assert body['respondedAt'] is not None


def test_any_status_may_follow_any_other(ctx):
    submission = contact.submit(JANE)
    for status in ('closed', 'new', 'responded', 'in_progress'):
        assert contact.update_status(submission.id, status).status == status
    # First response time is kept
    assert submission.responded_at is not None


def test_unknown_status_is_rejected(ctx):
    submission = contact.submit(JANE)
    with pytest.raises(ValidationError):
        contact.update_status(submission.id, 'spam')


def test_newest_submissions_first(client, editor_client):
    first = client.post('/api/contact', json=JANE).get_json()['id']
    second = client.post('/api/contact', json={**JANE, 'name': 'Joe'}).get_json()['id']
    listed = [s['id'] for s in editor_client.get('/api/admin/contact').get_json()]
    assert listed == [second, first]


def test_submissions_are_not_public(client, viewer_client):
    client.post('/api/contact', json=JANE)
    assert client.get('/api/admin/contact').status_code == 401
    assert viewer_client.get('/api/admin/contact').status_code == 403


def test_only_admin_deletes_submissions(client, editor_client, admin_client):
    submission_id = client.post('/api/contact', json=JANE).get_json()['id']
    assert editor_client.delete(f'/api/admin/contact/{submission_id}').status_code == 403
    assert admin_client.delete(f'/api/admin/contact/{submission_id}').status_code == 200
    assert admin_client.get(f'/api/admin/contact/{submission_id}').status_code == 404
