"""
Domain exceptions for the order management business logic

These exceptions represent business rule violations. They are raised by the
business layer and turned into error envelopes by the presentation layer,
which reads the HTTP status and API error code carried by each class.
"""


class DomainError(Exception):
    """Base exception for all order management domain errors"""
    status = 500
    error_code = 'E500'

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class BadRequestError(DomainError):
    """Raised when a request body cannot be interpreted"""
    status = 400
    error_code = 'E400'


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist"""
    status = 404
    error_code = 'E404'


class UserNotFoundError(NotFoundError):
    def __init__(self, message='User not found'):
        super().__init__(message)


class ProductNotFoundError(NotFoundError):
    def __init__(self, message='Product not found'):
        super().__init__(message)


class OrderNotFoundError(NotFoundError):
    def __init__(self, message='Order not found'):
        super().__init__(message)


class InsufficientStockError(DomainError):
    """Raised when a product does not hold enough stock for a debit"""
    status = 400
    error_code = 'E400'

    def __init__(self, message='Not enough product in stock', product_id=None, requested=None, available=None):
        super().__init__(message)
        self.product_id = product_id
        self.requested = requested
        self.available = available


class ConflictError(DomainError):
    """Raised when a unique value (email, product code) is already taken"""
    status = 409
    error_code = 'E409'
