# devconnector/api/auth/test_auth.py
"""
로그인(POST /api/auth), 현재 사용자 조회(GET /api/auth) 및 인증 가드 테스트
"""
from datetime import timedelta

import pytest
from flask_jwt_extended import create_refresh_token

from devconnector.core.security import TokenService


def test_get_current_user_without_password(register, client, auth_headers, user_id_of):
    token = register()
    res = client.get('/api/auth', headers=auth_headers(token))
    assert res.status_code == 200
    body = res.get_json()
    assert body['user_id'] == user_id_of(token)
    assert body['name'] == "Ann"
    assert body['email'] == "ann@x.com"
    assert 'password' not in body
    assert body['avatar'].startswith("//www.gravatar.com/avatar/")


def test_guard_rejects_missing_token(client):
    res = client.get('/api/auth')
    assert res.status_code == 401
    assert res.get_json() == {"msg": "No token, authorization denied"}


def test_guard_rejects_invalid_token(client, auth_headers):
    res = client.get('/api/auth', headers=auth_headers("garbage.token.value"))
    assert res.status_code == 401
    assert res.get_json() == {"msg": "Token is not valid"}


def test_guard_rejects_expired_token(register, app, client, auth_headers, user_id_of):
    user_id = user_id_of(register())
    with app.app_context():
        expired = TokenService(expires_delta=timedelta(seconds=-10)).issue(user_id)
    res = client.get('/api/auth', headers=auth_headers(expired))
    assert res.status_code == 401
    assert res.get_json() == {"msg": "Token is not valid"}


def test_login_returns_token_for_same_user(register, client, user_id_of):
    registered = register()
    res = client.post('/api/auth', json={"email": "ann@x.com", "password": "secret1"})
    assert res.status_code == 200
    assert user_id_of(res.get_json()['token']) == user_id_of(registered)


def test_login_does_not_reveal_which_part_is_wrong(register, client):
    """없는 이메일과 틀린 비밀번호는 같은 응답"""
    register()
    wrong_password = client.post('/api/auth', json={"email": "ann@x.com", "password": "nope123"})
    unknown_email = client.post('/api/auth', json={"email": "bob@x.com", "password": "secret1"})

    expected = {"errors": [{"msg": "Invalid credentials"}]}
    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.get_json() == unknown_email.get_json() == expected


def test_login_validation(client):
    res = client.post('/api/auth', json={"email": "not-an-email"})
    assert res.status_code == 400
    assert res.get_json() == {"errors": [
        {"msg": "Please include a valid email", "param": "email"},
        {"msg": "Please enter password", "param": "password"},
    ]}


def test_current_user_missing_is_server_error(register, client, auth_headers, fake_db, user_id_of):
    """검증된 토큰이 삭제된 사용자를 가리키면 정합성 오류(500)"""
    token = register()
    fake_db.collection('users').document(user_id_of(token)).delete()
    res = client.get('/api/auth', headers=auth_headers(token))
    assert res.status_code == 500
    assert res.get_json() == {"msg": "Server Error"}


@pytest.mark.parametrize("password", ["", 123, None])
def test_login_rejects_empty_or_non_string_password(register, client, password):
    register()
    res = client.post('/api/auth', json={"email": "ann@x.com", "password": password})
    assert res.status_code == 400
    assert res.get_json() == {"errors": [{"msg": "Please enter password", "param": "password"}]}


def test_current_user_date_uses_z_suffix(register, client, auth_headers):
    res = client.get('/api/auth', headers=auth_headers(register()))
    assert res.get_json()['date'].endswith('Z')


def test_guard_and_token_service_agree(register, app, client, auth_headers, user_id_of):
    """access 토큰만 통과하고 refresh 토큰은 가드와 TokenService 모두에서 거부되어야 함"""
    access = register()
    with app.app_context():
        refresh = create_refresh_token(identity=user_id_of(access))
        tokens = app.services['tokens']
        assert tokens.verify(access) == user_id_of(access)
        assert tokens.verify(refresh) is None

    assert client.get('/api/auth', headers=auth_headers(access)).status_code == 200
    res = client.get('/api/auth', headers=auth_headers(refresh))
    assert res.status_code == 401
    assert res.get_json() == {"msg": "Token is not valid"}
