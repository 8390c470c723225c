"""
Gallery Blueprint

Public project gallery with likes and comments.
"""

from flask import Blueprint

gallery_bp = Blueprint('gallery', __name__)

from showcase.gallery import routes  # noqa: E402, F401
