"""
HTTP tests for the /api/users routes
"""

import pytest
from conftest import add_product, add_user
from app.buisness.errors import ConflictError


def test_create_user_generates_uid(client):
    response = client.post('/api/users', json={'name': 'Ann', 'email': 'ann@example.com', 'uid': 'chosen'})

    assert response.status_code == 200
    body = response.get_json()
    assert body['message'] == 'User created'
    user = body['data']
    assert user['name'] == 'Ann'
    assert user['email'] == 'ann@example.com'
    assert user['uid'] != 'chosen', "uid must be generated by the server"
    assert len(user['uid']) == 36


def test_create_user_requires_fields(client):
    response = client.post('/api/users', json={'name': 'Ann'})

    assert response.status_code == 400
    assert response.get_json()['errorDetails'] == 'Missing required field(s): email'


def test_create_user_duplicate_email(client, components):
    add_user(components, email='ann@example.com')

    response = client.post('/api/users', json={'name': 'Other', 'email': 'ann@example.com'})

    body = response.get_json()
    assert response.status_code == 409
    assert body['errorCode'] == 'E409'
    assert body['message'] == 'Conflict'
    assert body['errorDetails'] == 'Email already in use'


def test_list_and_get_users(client, components):
    ann = add_user(components, name='Ann', email='ann@example.com')
    add_user(components, name='Bob', email='bob@example.com')

    listed = client.get('/api/users').get_json()
    assert listed['message'] == 'Users found'
    assert [user['name'] for user in listed['data']] == ['Ann', 'Bob']

    by_id = client.get(f'/api/users/{ann.id}').get_json()
    assert by_id['message'] == 'User found'
    assert by_id['data']['uid'] == ann.uid

    by_uid = client.get(f'/api/users/uid/{ann.uid}').get_json()
    assert by_uid['data']['id'] == ann.id


def test_get_missing_user(client):
    for path in ('/api/users/5', '/api/users/uid/nobody'):
        response = client.get(path)
        assert response.status_code == 404, f"{path} should be 404"
        assert response.get_json()['errorDetails'] == 'User not found'


def test_update_user(client, components):
    ann = add_user(components, name='Ann', email='ann@example.com')
    original_uid = ann.uid

    response = client.put(f'/api/users/{ann.id}', json={'name': 'Annie', 'uid': 'changed', 'id': 77})

    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['name'] == 'Annie'
    assert data['uid'] == original_uid
    assert data['id'] == ann.id


def test_update_user_email_conflict(client, components):
    add_user(components, name='Ann', email='ann@example.com')
    bob = add_user(components, name='Bob', email='bob@example.com')

    response = client.put(f'/api/users/{bob.id}', json={'email': 'ann@example.com'})

    assert response.status_code == 409


def test_delete_user_keeps_orders(client, components):
    user = add_user(components)
    product = add_product(components, amount=5)
    components.orders.create(user.uid, product.id, 2)

    response = client.delete(f'/api/users/{user.id}')

    assert response.get_json() == {'status': 200, 'message': 'User deleted', 'data': None}
    order = client.get('/api/orders/1').get_json()['data']
    assert order['userId'] is None
    assert order['user'] is None
    assert order['uid'] == user.uid, "Order keeps the uid snapshot"


def test_concurrent_duplicate_email_is_conflict(components, monkeypatch):
    """An email taken between the uniqueness check and the insert is still a 409"""
    add_user(components, email='ann@example.com')
    repository = components.users.users
    lookup = repository.get_by_email
    calls = []

    def late_lookup(email):
        calls.append(email)
        return None if len(calls) == 1 else lookup(email)

    monkeypatch.setattr(repository, 'get_by_email', late_lookup)

    with pytest.raises(ConflictError):
        components.users.create(name='Other', email='ann@example.com')

    assert len(components.users.list_all()) == 1
