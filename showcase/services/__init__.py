"""
Services Package

Exports all services for easy importing.
"""

from showcase.services.errors import ValidationError
from showcase.services.filtering import filter_projects, matches_search
from showcase.services.engagement import (
    toggle_like, has_liked, add_comment, list_comments, recount_engagement
)
from showcase.services.projects import (
    list_projects, parse_project_form, create_project, update_project, delete_project,
    gallery_stats
)

__all__ = [
    'ValidationError',
    'filter_projects',
    'matches_search',
    'toggle_like',
    'has_liked',
    'add_comment',
    'list_comments',
    'recount_engagement',
    'list_projects',
    'parse_project_form',
    'create_project',
    'update_project',
    'delete_project',
    'gallery_stats',
]
