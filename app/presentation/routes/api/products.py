"""
Product routes
CRUD for products; lookup by (upper-cased) code
"""

from app.presentation.routes.api import api_bp
from app.presentation.routes.api.request_utils import api_operation, components, json_body, require_fields
from app.utils.responses import custom_success


@api_bp.get('/products')
@api_operation('Failed to retrieve products')
def list_products():
    return custom_success('Products found', [product.to_dict() for product in components().products.list_all()])


@api_bp.get('/products/<int:product_id>')
@api_operation('Failed to retrieve product')
def get_product(product_id):
    return custom_success('Product found', components().products.get(product_id).to_dict())


@api_bp.get('/products/code/<code>')
@api_operation('Failed to retrieve product')
def get_product_by_code(code):
    return custom_success('Product found', components().products.get_by_code(code).to_dict())


@api_bp.post('/products')
@api_operation('Failed to create product')
def create_product():
    """Create a product: body {code, name, description, price, amount}"""
    data = json_body()
    require_fields(data, 'code', 'name')
    product = components().products.create(data)
    return custom_success('Product created', product.to_dict())


@api_bp.put('/products/<int:product_id>')
@api_operation('Failed to update product')
def update_product(product_id):
    product = components().products.update(product_id, json_body())
    return custom_success('Product updated', product.to_dict())


@api_bp.delete('/products/<int:product_id>')
@api_operation('Failed to delete product')
def delete_product(product_id):
    components().products.delete(product_id)
    return custom_success('Product deleted', None)
