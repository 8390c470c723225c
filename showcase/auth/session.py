"""
Session Gate

The signed session cookie holds a credential reference (the admin row id,
kept by Flask-Login) and, separately, the anonymous visitor id used for
likes. The credential is re-checked against the admins table on every
request; a reference to a missing row is dropped.

This gate only decides what the site renders. Anything that writes goes
through server-side checks in the admin routes.
"""

import logging
from uuid import uuid4

from flask import session
from flask_login import login_user, logout_user, current_user

from showcase.extensions import db
from showcase.models import Admin

logger = logging.getLogger(__name__)

# Flask-Login stores the credential reference under this key
CREDENTIAL_KEY = '_user_id'
VISITOR_KEY = 'visitor_id'


def load_admin(admin_id):
    """Look up the Admin row referenced by a stored credential."""
    try:
        return db.session.get(Admin, int(admin_id))
    except (TypeError, ValueError):
        return None


def check_session():
    """Clear a stored credential that no longer resolves to an admin."""
    if CREDENTIAL_KEY in session and not current_user.is_authenticated:
        logger.info('Dropping stale admin credential %r', session.get(CREDENTIAL_KEY))
        logout()


def login(username, password):
    """Authenticate an admin and persist the row id in the session.

    Returns:
        The Admin on success, None otherwise. The session is left
        untouched on failure.
    """
    username = (username or '').strip()
    if not username or not password:
        return None

    admin = Admin.query.filter_by(username=username).first()
    if admin is None or not admin.check_password(password):
        logger.warning('Failed admin login for %r', username)
        return None

    login_user(admin)
    logger.info('Admin %s logged in', admin.username)
    return admin


def logout():
    """Forget the admin credential. Safe to call when nobody is logged in."""
    logout_user()


def session_flags():
    """Authentication flags exposed to views and templates."""
    authenticated = bool(current_user.is_authenticated)
    return {
        'is_authenticated': authenticated,
        'is_admin': authenticated and bool(getattr(current_user, 'is_admin', False)),
    }


def get_visitor_id(create=True):
    """Return this browser's visitor id, minting one on first use."""
    visitor_id = session.get(VISITOR_KEY)
    if visitor_id is None and create:
        visitor_id = uuid4().hex
        session[VISITOR_KEY] = visitor_id
    return visitor_id
