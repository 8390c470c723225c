"""
Project Services

Queries and admin-side writes for projects.
"""

import logging

from flask import current_app
from sqlalchemy import func

from showcase.extensions import db
from showcase.models import Comment, Project
from showcase.services.errors import ValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = {
    'student_name': 'Student name is required.',
    'project_title': 'Project title is required.',
    'main_project_image': 'Project image is required.',
}

OPTIONAL_LINK_FIELDS = (
    'linkedin_link',
    'github_link',
    'live_project_link',
    'linkedin_profile_picture',
    'project_video',
)


def list_projects():
    """All projects, most recent first."""
    return Project.query.order_by(Project.created_at.desc(), Project.id.desc()).all()


def split_technologies(raw):
    """Split a comma-separated technology list, keeping order and dropping blanks."""
    return [tech.strip() for tech in (raw or '').split(',') if tech.strip()]


def parse_project_form(form, categories=None):
    """Validate admin form data and return the column values for a Project.

    Raises:
        ValidationError: listing every problem found.
    """
    if categories is None:
        categories = current_app.config['PROJECT_CATEGORIES']

    data = {}
    errors = []

    for name, message in REQUIRED_FIELDS.items():
        value = (form.get(name) or '').strip()
        if not value:
            errors.append(message)
        data[name] = value

    category = (form.get('category') or '').strip()
    if not category:
        errors.append('Category is required.')
    elif category not in categories:
        errors.append(f'Unknown category "{category}".')
    data['category'] = category

    technologies = split_technologies(form.get('tools_technologies'))
    if not technologies:
        errors.append('Technologies are required.')
    data['tools_technologies'] = technologies

    for name in OPTIONAL_LINK_FIELDS:
        data[name] = (form.get(name) or '').strip() or None

    if errors:
        raise ValidationError(errors)
    return data


def create_project(data):
    project = Project(**data)
    db.session.add(project)
    db.session.commit()
    logger.info('Created project %s (%s)', project.id, project.project_title)
    return project


def update_project(project, data):
    for key, value in data.items():
        setattr(project, key, value)
    db.session.commit()
    logger.info('Updated project %s', project.id)
    return project


def delete_project(project):
    """Delete a project together with its likes and comments."""
    project_id = project.id
    db.session.delete(project)
    db.session.commit()
    logger.info('Deleted project %s', project_id)


def gallery_stats():
    """Totals shown on the landing page."""
    total_projects = Project.query.count()
    total_likes = db.session.query(func.coalesce(func.sum(Project.likes_count), 0)).scalar()
    total_comments = db.session.query(func.count(Comment.id)).scalar()
    return {
        'projects': total_projects,
        'likes': int(total_likes or 0),
        'comments': int(total_comments or 0),
    }
