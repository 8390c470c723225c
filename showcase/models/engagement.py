"""
Comment and Like Models
"""

from datetime import datetime

from showcase.extensions import db


class Comment(db.Model):
    """Visitor comment on a project"""
    __tablename__ = 'comments'

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, db.ForeignKey('projects.id'), nullable=False, index=True)
    user_name = db.Column(db.String(120), nullable=False)
    comment_text = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'project_id': self.project_id,
            'user_name': self.user_name,
            'comment_text': self.comment_text,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Comment Project:{self.project_id} by {self.user_name}>'


class Like(db.Model):
    """One visitor's like on a project"""
    __tablename__ = 'likes'
    __table_args__ = (
        db.UniqueConstraint('project_id', 'visitor_id', name='uq_likes_project_visitor'),
    )

    id = db.Column(db.Integer, primary_key=True)
    project_id = db.Column(db.Integer, db.ForeignKey('projects.id'), nullable=False, index=True)
    visitor_id = db.Column(db.String(64), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Like Project:{self.project_id} Visitor:{self.visitor_id}>'
