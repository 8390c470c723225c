"""
Engagement Services

Likes and comments. Every write also updates the matching counter on
the project inside the same commit. Counter updates are issued as SQL
expressions (`likes_count = likes_count + 1`), never written back from Python.
"""

import logging

from sqlalchemy import case, func
from sqlalchemy.exc import IntegrityError

from showcase.extensions import db
from showcase.models import Comment, Like, Project
from showcase.services.errors import ValidationError

logger = logging.getLogger(__name__)

MAX_USER_NAME_LENGTH = 120


def has_liked(project_id, visitor_id):
    """Return True if this visitor currently likes the project."""
    if not visitor_id:
        return False
    return Like.query.filter_by(project_id=project_id, visitor_id=visitor_id).first() is not None


def toggle_like(project, visitor_id):
    """Like the project, or remove an existing like by the same visitor.

    Returns:
        Tuple of (liked, likes_count) after the toggle.
    """
    if not visitor_id:
        raise ValidationError('A visitor id is required to like a project.')

    existing = Like.query.filter_by(project_id=project.id, visitor_id=visitor_id).first()

    if existing:
        db.session.delete(existing)
        project.likes_count = case((Project.likes_count > 0, Project.likes_count - 1), else_=0)
        liked = False
    else:
        db.session.add(Like(project_id=project.id, visitor_id=visitor_id))
        project.likes_count = Project.likes_count + 1
        liked = True

    try:
        db.session.commit()
    except IntegrityError:
        # Another request inserted the same like first
        db.session.rollback()
        logger.info('Duplicate like ignored for project %s', project.id)
        db.session.refresh(project)
        return True, project.likes_count

    db.session.refresh(project)
    logger.debug('Project %s like toggled -> %s (%s)', project.id, liked, project.likes_count)
    return liked, project.likes_count


def list_comments(project_id):
    """Comments for a project, newest first."""
    return Comment.query.filter_by(project_id=project_id)\
        .order_by(Comment.created_at.desc(), Comment.id.desc()).all()


def add_comment(project, user_name, comment_text):
    """Store a visitor comment and bump the project's comment counter."""
    user_name = (user_name or '').strip()
    comment_text = (comment_text or '').strip()

    errors = []
    if not user_name:
        errors.append('Please enter your name.')
    elif len(user_name) > MAX_USER_NAME_LENGTH:
        errors.append(f'Name must be at most {MAX_USER_NAME_LENGTH} characters.')
    if not comment_text:
        errors.append('Comment cannot be empty.')
    if errors:
        raise ValidationError(errors)

    comment = Comment(project_id=project.id, user_name=user_name, comment_text=comment_text)
    db.session.add(comment)
    project.comments_count = Project.comments_count + 1
    db.session.commit()
    db.session.refresh(project)
    return comment


def recount_engagement(project=None):
    """Rebuild likes_count and comments_count from the rows.

    Args:
        project: Project to fix, or None for every project.

    Returns:
        Number of projects whose counters changed.
    """
    projects = [project] if project is not None else Project.query.all()
    changed = 0

    for p in projects:
        likes = db.session.query(func.count(Like.id)).filter(Like.project_id == p.id).scalar()
        comments = db.session.query(func.count(Comment.id)).filter(Comment.project_id == p.id).scalar()
        if p.likes_count != likes or p.comments_count != comments:
            logger.info('Recounted project %s: likes %s -> %s, comments %s -> %s',
                        p.id, p.likes_count, likes, p.comments_count, comments)
            p.likes_count = likes
            p.comments_count = comments
            changed += 1

    db.session.commit()
    return changed
