"""
User routes
CRUD for users; uid lookups
"""

from app.presentation.routes.api import api_bp
from app.presentation.routes.api.request_utils import api_operation, components, json_body, require_fields
from app.utils.responses import custom_success


@api_bp.get('/users')
@api_operation('Failed to retrieve users')
def list_users():
    return custom_success('Users found', [user.to_dict() for user in components().users.list_all()])


@api_bp.get('/users/<int:user_id>')
@api_operation('Failed to retrieve user')
def get_user(user_id):
    return custom_success('User found', components().users.get(user_id).to_dict())


@api_bp.get('/users/uid/<uid>')
@api_operation('Failed to retrieve user')
def get_user_by_uid(uid):
    return custom_success('User found', components().users.get_by_uid(uid).to_dict())


@api_bp.post('/users')
@api_operation('Failed to create user')
def create_user():
    """Create a user: body {name, email}; the uid is generated"""
    data = json_body()
    require_fields(data, 'name', 'email')
    user = components().users.create(name=data['name'], email=data['email'])
    return custom_success('User created', user.to_dict())


@api_bp.put('/users/<int:user_id>')
@api_operation('Failed to update user')
def update_user(user_id):
    user = components().users.update(user_id, json_body())
    return custom_success('User updated', user.to_dict())


@api_bp.delete('/users/<int:user_id>')
@api_operation('Failed to delete user')
def delete_user(user_id):
    components().users.delete(user_id)
    return custom_success('User deleted', None)
