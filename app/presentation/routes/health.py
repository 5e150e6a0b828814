"""
Liveness probe
"""

from flask import Blueprint, jsonify
from app import limiter

bp = Blueprint('health', __name__)


@bp.get('/health')
@limiter.exempt
def health():
    return jsonify({'status': 'ok'})
