"""
JSON API blueprint, mounted under /api
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__)

# Import route modules so their routes attach to the blueprint
from . import orders, products, users
