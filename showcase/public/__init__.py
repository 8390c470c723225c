"""
Public Blueprint

Landing page.
"""

from flask import Blueprint

public_bp = Blueprint('public', __name__)

from showcase.public import routes  # noqa: E402, F401
