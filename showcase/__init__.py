"""
Student Portfolio Showcase - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

import click
from flask import Flask
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from showcase.extensions import db, login_manager
from showcase.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'info'

    # Register blueprints
    from showcase.public import public_bp
    from showcase.gallery import gallery_bp
    from showcase.auth import auth_bp
    from showcase.admin import admin_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(gallery_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # Context processor for session flags
    @app.context_processor
    def inject_session_flags():
        """Inject `is_authenticated` and `is_admin` into templates."""
        from showcase.auth.session import session_flags
        return session_flags()

    # Credential reference -> Admin row
    @login_manager.user_loader
    def load_user(admin_id):
        from showcase.auth.session import load_admin
        return load_admin(admin_id)

    @app.template_filter('date')
    def format_date(value, fmt='%b %d, %Y'):
        return value.strftime(fmt) if value else ''

    app.cli.add_command(create_admin_command)

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') \
                and ':memory:' not in app.config['SQLALCHEMY_DATABASE_URI']:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()
        _ensure_default_data(app)

    return app


def _configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(level=level,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app.logger.setLevel(level)


def _ensure_default_data(app):
    """Ensure a default admin exists when none has been created yet."""
    from showcase.models import Admin

    if not app.config.get('SEED_DEFAULT_ADMIN') or Admin.query.first():
        return

    admin = Admin(username=app.config['ADMIN_USERNAME'], email=app.config['ADMIN_EMAIL'])
    admin.set_password(app.config['ADMIN_PASSWORD'])
    try:
        db.session.add(admin)
        db.session.commit()
        app.logger.info('Created default admin %r', admin.username)
    except SQLAlchemyError:
        db.session.rollback()
        app.logger.exception('Could not create default admin')


@click.command('create-admin')
@click.argument('username')
@click.argument('email')
@click.password_option()
@with_appcontext
def create_admin_command(username, email, password):
    """Create an admin account, or reset the password of an existing one."""
    from showcase.models import Admin

    admin = Admin.query.filter_by(username=username).first()
    if admin is None:
        admin = Admin(username=username, email=email)
        db.session.add(admin)
        message = f'New admin {username} created'
    else:
        admin.email = email
        message = f'Password reset for existing admin {username}'

    admin.set_password(password)
    db.session.commit()
    click.echo(message)
