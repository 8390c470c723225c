"""
Public Routes
"""

from flask import current_app, render_template
from sqlalchemy.exc import SQLAlchemyError

from showcase.public import public_bp
from showcase.services import gallery_stats, list_projects


@public_bp.route('/')
def index():
    """Landing page with totals and the most recent projects."""
    try:
        stats = gallery_stats()
        recent = list_projects()[:current_app.config['RECENT_PROJECTS_LIMIT']]
    except SQLAlchemyError:
        current_app.logger.exception('Error loading landing page data')
        stats = {'projects': 0, 'likes': 0, 'comments': 0}
        recent = []

    return render_template('public/home.html', stats=stats, recent_projects=recent)
