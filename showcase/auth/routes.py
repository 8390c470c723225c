"""
Auth Routes

Admin login and logout.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import current_user

from showcase.auth import auth_bp
from showcase.auth import session as session_gate


def _safe_next(target):
    """Only follow relative redirects inside this site."""
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return None


@auth_bp.before_app_request
def verify_credential():
    """Re-check the stored admin credential on every request."""
    session_gate.check_session()


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login form"""
    if current_user.is_authenticated:
        return redirect(url_for('admin.dashboard'))

    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        if not username or not password:
            flash('Please enter both username and password.', 'danger')
            return render_template('auth/login.html'), 400

        admin = session_gate.login(username, password)
        if admin is None:
            flash('Invalid credentials.', 'danger')
            return render_template('auth/login.html'), 401

        flash('Login successful!', 'success')
        next_page = _safe_next(request.args.get('next'))
        return redirect(next_page or url_for('admin.dashboard'))

    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """Admin logout"""
    session_gate.logout()
    flash('Logged out successfully.', 'info')
    return redirect(url_for('public.index'))
