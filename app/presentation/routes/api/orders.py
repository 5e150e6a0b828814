"""
Order routes
List, read, create, update and delete orders; stock follows every change.
"""

from flask import request
from app.presentation.routes.api import api_bp
from app.presentation.routes.api.request_utils import api_operation, components, int_field, json_body
from app.utils.responses import custom_success


@api_bp.get('/orders')
@api_operation('Failed to retrieve orders')
def list_orders():
    """List orders, paginated with ?page=&pageSize="""
    page = request.args.get('page', type=int)
    page_size = request.args.get('pageSize', type=int)
    return custom_success('Orders found', components().orders.get_all(page, page_size))


@api_bp.get('/orders/<int:order_id>')
@api_operation('Failed to retrieve order')
def get_order(order_id):
    order = components().orders.get_by_id(order_id)
    return custom_success('Order found', order.to_list_dict())


@api_bp.post('/orders')
@api_operation('Failed to create order')
def create_order():
    """Create an order: body {uid, productId, amount}"""
    data = json_body()
    result = components().orders.create(
        uid=data.get('uid'),
        product_id=int_field(data, 'productId'),
        quantity=int_field(data, 'amount'),
    )
    return custom_success('Order created', result)


@api_bp.put('/orders/<int:order_id>')
@api_operation('Failed to update order')
def update_order(order_id):
    """Update an order's amount: body {amount?}"""
    data = json_body()
    order = components().orders.update(order_id, int_field(data, 'amount', required=False))
    return custom_success('Order updated', order.to_dict())


@api_bp.delete('/orders/<int:order_id>')
@api_operation('Failed to delete order')
def delete_order(order_id):
    components().orders.delete(order_id)
    return custom_success('Order deleted', None)


@api_bp.get('/users/<uid>/orders')
@api_operation('Failed to retrieve user orders')
def list_user_orders(uid):
    orders = components().orders.get_by_user_uid(uid)
    return custom_success('User orders found', [order.to_user_dict() for order in orders])
