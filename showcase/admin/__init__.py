"""
Admin Blueprint

Project management dashboard, reachable only with an admin session.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from showcase.admin import routes  # noqa: E402, F401
