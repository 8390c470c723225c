from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from showcase.models import Project


def _store_down(*args, **kwargs):
    raise SQLAlchemyError('database is unavailable')


def test_home_shows_stats_and_recent_projects(client, make_project):
    make_project(project_title='Weather Bot')
    r = client.get('/')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert '1 projects' in body
    assert 'Weather Bot' in body


def test_portfolio_lists_newest_first(client, make_project):
    now = datetime.utcnow()
    make_project(project_title='Older', created_at=now - timedelta(days=2))
    make_project(project_title='Newer', created_at=now)

    r = client.get('/portfolio')
    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert body.index('Newer') < body.index('Older')


def test_portfolio_search_and_category(client, make_project):
    make_project(project_title='Bot', tools_technologies=['Python'], category='Automation')
    make_project(project_title='Shop', tools_technologies=['React'], category='Web Application')

    r = client.get('/api/projects?q=react')
    assert [p['project_title'] for p in r.get_json()] == ['Shop']

    r = client.get('/api/projects?category=Automation')
    assert [p['project_title'] for p in r.get_json()] == ['Bot']

    r = client.get('/api/projects?q=react&category=Automation')
    assert r.get_json() == []

    r = client.get('/portfolio?q=zzz')
    assert 'No Projects Found' in r.get_data(as_text=True)


def test_api_projects_shape(client, make_project):
    make_project()
    item = client.get('/api/projects').get_json()[0]
    for key in ('id', 'student_name', 'project_title', 'tools_technologies', 'category',
                'created_at', 'main_project_image', 'likes_count', 'comments_count'):
        assert key in item
    assert item['tools_technologies'] == ['Python', 'Telegram']


def test_project_detail_and_missing_project(client, make_project):
    project_id = make_project(github_link='https://github.com/asha/bot')
    r = client.get(f'/portfolio/{project_id}')
    assert r.status_code == 200
    assert 'https://github.com/asha/bot' in r.get_data(as_text=True)

    assert client.get('/portfolio/9999').status_code == 404
    assert client.post('/portfolio/9999/like').status_code == 404


def test_like_toggle_round_trip(client, make_project, fetch):
    project_id = make_project()

    r = client.post(f'/portfolio/{project_id}/like')
    assert r.status_code == 200
    assert r.get_json() == {'project_id': project_id, 'liked': True, 'likes_count': 1}
    assert fetch(Project, project_id).likes_count == 1

    r = client.post(f'/portfolio/{project_id}/like')
    assert r.get_json()['liked'] is False
    assert r.get_json()['likes_count'] == 0
    assert fetch(Project, project_id).likes_count == 0


def test_likes_are_per_visitor(app, make_project, fetch):
    project_id = make_project()
    first = app.test_client()
    second = app.test_client()

    assert first.post(f'/portfolio/{project_id}/like').get_json()['likes_count'] == 1
    assert second.post(f'/portfolio/{project_id}/like').get_json()['likes_count'] == 2

    with first.session_transaction() as sess:
        first_visitor = sess['visitor_id']
    with second.session_transaction() as sess:
        assert sess['visitor_id'] != first_visitor

    r = first.post(f'/portfolio/{project_id}/like')
    assert r.get_json() == {'project_id': project_id, 'liked': False, 'likes_count': 1}
    assert fetch(Project, project_id).likes_count == 1


def test_add_comment_and_list_newest_first(client, make_project, fetch):
    project_id = make_project()

    r = client.post(f'/portfolio/{project_id}/comments',
                    data={'user_name': 'Sam', 'comment_text': 'First!'}, follow_redirects=True)
    assert r.status_code == 200
    assert 'Comment added!' in r.get_data(as_text=True)
    client.post(f'/portfolio/{project_id}/comments',
                data={'user_name': 'Lee', 'comment_text': 'Nice work'})

    comments = client.get(f'/portfolio/{project_id}/comments').get_json()
    assert [c['comment_text'] for c in comments] == ['Nice work', 'First!']
    assert fetch(Project, project_id).comments_count == 2


def test_blank_comment_is_rejected(client, make_project, fetch):
    project_id = make_project()

    r = client.post(f'/portfolio/{project_id}/comments',
                    data={'user_name': '  ', 'comment_text': ''}, follow_redirects=True)
    body = r.get_data(as_text=True)
    assert 'Please enter your name.' in body
    assert 'Comment cannot be empty.' in body
    assert client.get(f'/portfolio/{project_id}/comments').get_json() == []
    assert fetch(Project, project_id).comments_count == 0


def test_like_store_failure_returns_json_error(client, make_project, monkeypatch, fetch):
    project_id = make_project()
    monkeypatch.setattr('showcase.gallery.routes.toggle_like', _store_down)

    r = client.post(f'/portfolio/{project_id}/like')
    assert r.status_code == 500
    assert r.get_json() == {'error': 'Failed to update like'}
    assert fetch(Project, project_id).likes_count == 0


def test_api_projects_store_failure(client, monkeypatch):
    monkeypatch.setattr('showcase.gallery.routes.list_projects', _store_down)

    r = client.get('/api/projects')
    assert r.status_code == 500
    assert r.get_json() == {'error': 'Failed to load projects'}


def test_portfolio_store_failure_flashes(client, make_project, monkeypatch):
    make_project(project_title='Weather Bot')
    monkeypatch.setattr('showcase.gallery.routes.list_projects', _store_down)

    r = client.get('/portfolio')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Failed to load projects.' in body
    assert 'No Projects Found' in body


def test_comment_store_failure_flashes(client, make_project, monkeypatch, fetch):
    project_id = make_project()
    monkeypatch.setattr('showcase.gallery.routes.add_comment', _store_down)

    r = client.post(f'/portfolio/{project_id}/comments',
                    data={'user_name': 'Sam', 'comment_text': 'Hi'}, follow_redirects=True)
    assert r.status_code == 200
    assert 'Failed to add comment.' in r.get_data(as_text=True)
    assert fetch(Project, project_id).comments_count == 0


def test_home_store_failure_shows_empty_page(client, monkeypatch):
    monkeypatch.setattr('showcase.public.routes.gallery_stats', _store_down)

    r = client.get('/')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert '0 projects' in body
    assert 'No projects yet.' in body
