"""
Flask Extensions

Admin authentication is the only login in the site; visitors stay anonymous.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for admin authentication
login_manager = LoginManager()
