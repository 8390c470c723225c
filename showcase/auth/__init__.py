"""
Auth Blueprint

Admin login/logout and the per-request session gate.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from showcase.auth import routes  # noqa: E402, F401
