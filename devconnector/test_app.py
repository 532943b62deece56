# devconnector/test_app.py
from devconnector.core.config import config_by_name


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert res.get_json() == {"msg": "API Running"}


def test_unknown_route_returns_json_404(client):
    res = client.get('/api/nothing-here')
    assert res.status_code == 404
    assert 'msg' in res.get_json()


def test_wrong_method_returns_json_405(client):
    res = client.patch('/api/post')
    assert res.status_code == 405
    assert 'msg' in res.get_json()


def test_services_are_registered(app):
    assert set(app.services) == {'tokens', 'auth', 'profiles', 'posts', 'github'}


def test_config_names():
    assert set(config_by_name) == {'development', 'testing', 'production'}
    assert config_by_name['testing'].JWT_HEADER_NAME == 'x-auth-token'
