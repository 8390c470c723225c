"""
Admin Routes

CRUD dashboard for project entries.
"""

from flask import current_app, render_template, request, redirect, url_for, flash
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError

from showcase.admin import admin_bp
from showcase.admin.decorators import admin_required
from showcase.extensions import db
from showcase.models import Project
from showcase.services import (
    ValidationError, list_projects, parse_project_form, create_project,
    update_project, delete_project, recount_engagement
)


def _render_form(project=None, form=None, status=200):
    return render_template('admin/project_form.html',
                           project=project,
                           form=form or {},
                           categories=current_app.config['PROJECT_CATEGORIES']), status


@admin_bp.route('/', strict_slashes=False)
@admin_required
def dashboard():
    """Admin dashboard listing every project."""
    projects = list_projects()
    return render_template('admin/dashboard.html',
                           projects=projects,
                           admin_username=current_user.username)


@admin_bp.route('/projects/new', methods=['GET', 'POST'])
@admin_required
def new_project():
    """Create a project."""
    if request.method == 'POST':
        try:
            data = parse_project_form(request.form)
        except ValidationError as e:
            for message in e.messages:
                flash(message, 'danger')
            return _render_form(form=request.form, status=400)

        try:
            project = create_project(data)
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception('Could not create project')
            flash('Failed to save project.', 'danger')
            return _render_form(form=request.form, status=500)

        flash(f'Project "{project.project_title}" created successfully!', 'success')
        return redirect(url_for('admin.dashboard'))

    return _render_form()


@admin_bp.route('/projects/<int:project_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_project(project_id):
    """Edit an existing project."""
    project = db.get_or_404(Project, project_id)

    if request.method == 'POST':
        try:
            data = parse_project_form(request.form)
        except ValidationError as e:
            for message in e.messages:
                flash(message, 'danger')
            return _render_form(project=project, form=request.form, status=400)

        try:
            update_project(project, data)
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception('Could not update project %s', project_id)
            flash('Failed to save project.', 'danger')
            return _render_form(project=project, form=request.form, status=500)

        flash('Project updated successfully!', 'success')
        return redirect(url_for('admin.dashboard'))

    form = project.to_dict()
    form['tools_technologies'] = ', '.join(project.tools_technologies or [])
    return _render_form(project=project, form=form)


@admin_bp.route('/projects/<int:project_id>/delete', methods=['POST'])
@admin_required
def remove_project(project_id):
    """Delete a project and its likes and comments."""
    project = db.get_or_404(Project, project_id)
    title = project.project_title

    try:
        delete_project(project)
        flash(f'Project "{title}" deleted successfully!', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Could not delete project %s', project_id)
        flash('Failed to delete project.', 'danger')

    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/recount', methods=['POST'])
@admin_required
def recount():
    """Rebuild like/comment counters from the stored rows."""
    try:
        changed = recount_engagement()
        flash(f'Counters rebuilt ({changed} project(s) corrected).', 'success')
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Could not recount engagement')
        flash('Could not rebuild counters.', 'danger')
    return redirect(url_for('admin.dashboard'))
