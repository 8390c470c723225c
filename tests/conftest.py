import pytest

from showcase import create_app
from showcase.config import TestConfig
from showcase.extensions import db
from showcase.models import Admin, Project


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_id(app):
    with app.app_context():
        admin = Admin(username='admin', email='admin@example.com')
        admin.set_password('secret123')
        db.session.add(admin)
        db.session.commit()
        return admin.id


@pytest.fixture()
def admin_client(client, admin_id):
    r = client.post('/login', data={'username': 'admin', 'password': 'secret123'})
    assert r.status_code == 302
    return client


@pytest.fixture()
def make_project(app):
    """Insert a project and return its id."""
    def _make(**overrides):
        fields = {
            'student_name': 'Asha Rai',
            'project_title': 'Weather Bot',
            'tools_technologies': ['Python', 'Telegram'],
            'category': 'Automation',
            'main_project_image': 'https://img.example.com/bot.png',
        }
        fields.update(overrides)
        with app.app_context():
            project = Project(**fields)
            db.session.add(project)
            db.session.commit()
            return project.id
    return _make


@pytest.fixture()
def fetch(app):
    """Load a fresh copy of a row outside of any request."""
    def _fetch(model, pk):
        with app.app_context():
            obj = db.session.get(model, pk)
            if obj is not None:
                db.session.expunge(obj)
            return obj
    return _fetch
