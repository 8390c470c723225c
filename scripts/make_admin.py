"""Create an admin account, or reset its password.

Usage: python scripts/make_admin.py USERNAME EMAIL PASSWORD
"""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from showcase import create_app
from showcase.extensions import db
from showcase.models import Admin

if len(sys.argv) != 4:
    print(__doc__)
    sys.exit(1)

username, email, password = sys.argv[1:]
app = create_app()

with app.app_context():
    admin = Admin.query.filter_by(username=username).first()

    if not admin:
        admin = Admin(username=username, email=email)
        db.session.add(admin)
        print("New admin created")
    else:
        admin.email = email
        print("Existing admin password reset")

    admin.set_password(password)
    db.session.commit()
