# devconnector/core/test_security.py
"""
토큰 발급/검증 및 비밀번호 해시 테스트

사용법: python -m pytest devconnector/core/test_security.py -v
"""
from datetime import timedelta

import pytest

from devconnector.core.security import TokenService, hash_password, verify_password


def test_issued_token_verifies_to_same_user(app):
    """발급한 토큰은 만료 전까지 같은 user_id로 검증되어야 함"""
    with app.app_context():
        tokens = app.services['tokens']
        token = tokens.issue("user-123")
        assert tokens.verify(token) == "user-123"
        assert tokens.verify(token) == "user-123"


def test_token_expires_after_100_hours(app):
    """기본 만료 시간은 100시간"""
    assert app.config['JWT_ACCESS_TOKEN_EXPIRES'] == timedelta(hours=100)
    assert app.services['tokens'].expires_delta == timedelta(hours=100)


def test_expired_token_does_not_verify(app):
    with app.app_context():
        expired = TokenService(expires_delta=timedelta(seconds=-10)).issue("user-123")
        assert app.services['tokens'].verify(expired) is None


def test_tampered_token_does_not_verify(app):
    with app.app_context():
        tokens = app.services['tokens']
        token = tokens.issue("user-123")
        header, payload, signature = token.split('.')
        forged_signature = ('A' if signature[0] != 'A' else 'B') + signature[1:]
        assert tokens.verify('.'.join([header, payload, forged_signature])) is None


def test_token_signed_with_other_secret_does_not_verify(app):
    with app.app_context():
        token = app.services['tokens'].issue("user-123")
    app.config['JWT_SECRET_KEY'] = 'another-secret-key-with-enough-length-for-hs256'
    with app.app_context():
        assert app.services['tokens'].verify(token) is None


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c", None])
def test_malformed_token_returns_none(app, garbage):
    """검증 실패는 예외 대신 None을 반환해야 함"""
    with app.app_context():
        assert app.services['tokens'].verify(garbage) is None


def test_issue_without_secret_raises(app):
    app.config['JWT_SECRET_KEY'] = None
    app.config['SECRET_KEY'] = None
    with app.app_context():
        with pytest.raises(RuntimeError):
            app.services['tokens'].issue("user-123")


def test_password_hash_is_salted_and_one_way():
    first = hash_password("secret1")
    second = hash_password("secret1")
    assert first != "secret1"
    assert first != second
    assert verify_password(first, "secret1")
    assert not verify_password(first, "secret2")
