"""
Project Model
"""

from datetime import datetime

from showcase.extensions import db


class Project(db.Model):
    """A student project shown in the public gallery.

    ``likes_count`` and ``comments_count`` mirror the number of rows in
    ``likes`` and ``comments``; they are only changed in the same commit as
    those rows (see ``showcase.services.engagement``).
    """
    __tablename__ = 'projects'

    id = db.Column(db.Integer, primary_key=True)
    student_name = db.Column(db.String(120), nullable=False)
    project_title = db.Column(db.String(200), nullable=False)
    tools_technologies = db.Column(db.JSON, nullable=False, default=list)  # ["React", "Python"]
    category = db.Column(db.String(80))
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Links and media
    linkedin_link = db.Column(db.String(500))
    github_link = db.Column(db.String(500))
    live_project_link = db.Column(db.String(500))
    linkedin_profile_picture = db.Column(db.String(500))
    project_video = db.Column(db.String(500))
    main_project_image = db.Column(db.String(500), nullable=False)

    likes_count = db.Column(db.Integer, nullable=False, default=0)
    comments_count = db.Column(db.Integer, nullable=False, default=0)

    comments = db.relationship('Comment', backref='project', lazy=True,
                               cascade='all, delete-orphan')
    likes = db.relationship('Like', backref='project', lazy=True,
                            cascade='all, delete-orphan')

    def to_dict(self) -> dict:
        """Convert project to dictionary for API responses."""
        return {
            'id': self.id,
            'student_name': self.student_name,
            'project_title': self.project_title,
            'tools_technologies': list(self.tools_technologies or []),
            'category': self.category,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
            'linkedin_link': self.linkedin_link,
            'github_link': self.github_link,
            'live_project_link': self.live_project_link,
            'linkedin_profile_picture': self.linkedin_profile_picture,
            'project_video': self.project_video,
            'main_project_image': self.main_project_image,
            'likes_count': self.likes_count or 0,
            'comments_count': self.comments_count or 0,
        }

    def __repr__(self):
        return f'<Project {self.project_title}>'
