"""
Admin Decorator
"""

from functools import wraps

from flask import redirect, request, url_for

from showcase.auth.session import session_flags


def admin_required(f):
    """Decorator to ensure the request comes from an authenticated admin.

    Anonymous visitors are sent to the login page with a ``next`` pointer
    back to the page they asked for.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not session_flags()['is_admin']:
            return redirect(url_for('auth.login', next=request.full_path.rstrip('?')))
        return f(*args, **kwargs)
    return wrapper
