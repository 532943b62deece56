import logging
from datetime import timedelta
from typing import Optional

import jwt
from flask import jsonify
from flask_jwt_extended import JWTManager, create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from werkzeug.security import generate_password_hash, check_password_hash

NO_TOKEN_MESSAGE = "No token, authorization denied"
INVALID_TOKEN_MESSAGE = "Token is not valid"


class TokenService:
    """
    세션 토큰 발급/검증 서비스.
    서명 키는 앱 설정(JWT_SECRET_KEY)에서, 만료 시간은 생성 시 주입받습니다.
    """
    def __init__(self, expires_delta: timedelta):
        self.expires_delta = expires_delta

    def issue(self, user_id: str) -> str:
        """user_id를 subject로 담은 access 토큰을 발급합니다. 서명 키가 없으면 예외가 발생합니다."""
        return create_access_token(identity=user_id, expires_delta=self.expires_delta)

    def verify(self, token: str) -> Optional[str]:
        """
        서명과 만료를 검증하고 user_id를 반환합니다. 어떤 실패든 None을 반환합니다.

        요청 경로는 jwt_required()가 같은 설정(JWT_SECRET_KEY, access 타입)으로 검증하므로,
        이 메서드는 요청 컨텍스트 밖에서 토큰을 확인해야 하는 호출자를 위한 것입니다.
        """
        if not token:
            return None
        try:
            payload = decode_token(token)
        except (jwt.PyJWTError, JWTExtendedException, ValueError) as e:
            logging.info(f"토큰 검증 실패: {type(e).__name__}")
            return None
        if payload.get('type') != 'access':
            return None
        return payload.get('sub')


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    return check_password_hash(password_hash, password)


def register_auth_guard(jwt_manager: JWTManager):
    """
    jwt_required()가 거부한 요청의 응답 형식을 지정합니다.
    - 토큰 없음: 401 "No token, authorization denied"
    - 잘못된/위조된/만료된 토큰: 401 "Token is not valid"
    """
    @jwt_manager.unauthorized_loader
    def missing_token_callback(reason):
        return jsonify({"msg": NO_TOKEN_MESSAGE}), 401

    @jwt_manager.invalid_token_loader
    def invalid_token_callback(reason):
        return jsonify({"msg": INVALID_TOKEN_MESSAGE}), 401

    @jwt_manager.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"msg": INVALID_TOKEN_MESSAGE}), 401

    @jwt_manager.token_verification_failed_loader
    def claims_failed_callback(jwt_header, jwt_payload):
        return jsonify({"msg": INVALID_TOKEN_MESSAGE}), 401
