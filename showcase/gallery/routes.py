"""
Gallery Routes

Public listing, project detail, likes and comments.
"""

from flask import current_app, render_template, request, redirect, url_for, flash, jsonify
from sqlalchemy.exc import SQLAlchemyError

from showcase.auth.session import get_visitor_id
from showcase.extensions import db
from showcase.gallery import gallery_bp
from showcase.models import Project
from showcase.services import (
    ValidationError, filter_projects, list_projects, list_comments, add_comment,
    toggle_like, has_liked
)


def _filter_args():
    return request.args.get('q', ''), request.args.get('category', '')


@gallery_bp.route('/portfolio')
def portfolio():
    """Project gallery with search and category filters."""
    search_term, category = _filter_args()
    try:
        projects = list_projects()
    except SQLAlchemyError:
        current_app.logger.exception('Error loading projects')
        flash('Failed to load projects.', 'danger')
        projects = []

    filtered = filter_projects(projects, search_term, category)
    return render_template('gallery/portfolio.html',
                           projects=filtered,
                           search_term=search_term,
                           selected_category=category,
                           categories=current_app.config['PROJECT_CATEGORIES'])


@gallery_bp.route('/portfolio/<int:project_id>')
def project_detail(project_id):
    """Single project with its comments."""
    project = db.get_or_404(Project, project_id)
    visitor_id = get_visitor_id(create=False)
    return render_template('gallery/project_detail.html',
                           project=project,
                           comments=list_comments(project.id),
                           liked=has_liked(project.id, visitor_id))


@gallery_bp.route('/portfolio/<int:project_id>/like', methods=['POST'])
def like(project_id):
    """Toggle this visitor's like on a project."""
    project = db.get_or_404(Project, project_id)
    try:
        liked, likes_count = toggle_like(project, get_visitor_id())
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error handling like for project %s', project_id)
        return jsonify({'error': 'Failed to update like'}), 500

    return jsonify({'project_id': project.id, 'liked': liked, 'likes_count': likes_count})


@gallery_bp.route('/portfolio/<int:project_id>/comments', methods=['GET'])
def comments(project_id):
    """Comments for a project as JSON, newest first."""
    project = db.get_or_404(Project, project_id)
    return jsonify([c.to_dict() for c in list_comments(project.id)])


@gallery_bp.route('/portfolio/<int:project_id>/comments', methods=['POST'])
def post_comment(project_id):
    """Add a visitor comment."""
    project = db.get_or_404(Project, project_id)
    try:
        add_comment(project, request.form.get('user_name'), request.form.get('comment_text'))
        flash('Comment added!', 'success')
    except ValidationError as e:
        for message in e.messages:
            flash(message, 'danger')
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error adding comment to project %s', project_id)
        flash('Failed to add comment.', 'danger')

    return redirect(url_for('gallery.project_detail', project_id=project.id))


@gallery_bp.route('/api/projects')
def api_projects():
    """Filtered project list as JSON."""
    search_term, category = _filter_args()
    try:
        projects = list_projects()
    except SQLAlchemyError:
        current_app.logger.exception('Error loading projects')
        return jsonify({'error': 'Failed to load projects'}), 500

    return jsonify([p.to_dict() for p in filter_projects(projects, search_term, category)])
