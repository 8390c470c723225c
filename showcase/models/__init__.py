"""
Models Package

Exports all models for easy importing.
"""

from showcase.models.admin import Admin
from showcase.models.project import Project
from showcase.models.engagement import Comment, Like

__all__ = ['Admin', 'Project', 'Comment', 'Like']
