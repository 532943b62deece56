# devconnector/api/auth/services.py
import hashlib
import logging
import uuid
from dataclasses import asdict
from typing import Any, Dict
from urllib.parse import urlencode

from devconnector.core.errors import ApiError, ConflictError, InternalError
from devconnector.core.security import TokenService, hash_password, verify_password
from devconnector.models.user import User
from devconnector.utils.datetime_utils import for_firestore

GRAVATAR_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}


def gravatar_url(email: str) -> str:
    """이메일로부터 결정적으로 Gravatar URL을 만듭니다 (200px, pg 등급, 기본 이미지 mm)."""
    digest = hashlib.md5(email.strip().lower().encode('utf-8')).hexdigest()
    return f"//www.gravatar.com/avatar/{digest}?{urlencode(GRAVATAR_OPTIONS)}"


class AuthService:
    """
    사용자 계정(회원가입, 로그인, 현재 사용자 조회)을 담당하는 서비스 클래스.
    User 문서를 만드는 경로는 register 하나뿐입니다.
    """
    def __init__(self, db, token_service: TokenService):
        self.db = db
        self.users_ref = self.db.collection('users')
        self.token_service = token_service

    def _find_by_email(self, email: str):
        query = self.users_ref.where('email', '==', email).limit(1).stream()
        return next(query, None)

    def register(self, name: str, email: str, password: str) -> str:
        """새 사용자를 저장하고 발급한 토큰을 반환합니다. 이메일이 이미 있으면 ConflictError."""
        if self._find_by_email(email):
            raise ConflictError("User already exists", as_error_list=True)

        user_id = str(uuid.uuid4())
        new_user = User(
            user_id=user_id,
            name=name,
            email=email,
            password=hash_password(password),
            avatar=gravatar_url(email)
        )
        # 토큰 발급이 실패하면 문서를 남기지 않음
        token = self.token_service.issue(user_id)
        self.users_ref.document(user_id).set(for_firestore(asdict(new_user)))
        logging.info(f"회원가입 완료 (user_id: {user_id})")
        return token

    def get_current(self, user_id: str) -> Dict[str, Any]:
        """
        토큰의 user_id로 사용자 정보를 조회합니다 (비밀번호 제외).
        검증된 토큰이 없는 사용자를 가리키는 것은 데이터 정합성 문제이므로 InternalError로 처리합니다.
        """
        user_doc = self.users_ref.document(user_id).get()
        if not user_doc.exists:
            logging.error(f"유효한 토큰이 존재하지 않는 사용자를 가리킵니다 (user_id: {user_id})")
            raise InternalError()
        user_data = user_doc.to_dict()
        user_data.pop('password', None)
        return user_data

    def authenticate(self, email: str, password: str) -> str:
        """
        이메일/비밀번호를 확인하고 토큰을 발급합니다.
        없는 이메일과 틀린 비밀번호를 구분하지 않고 같은 오류를 돌려줍니다.
        """
        user_doc = self._find_by_email(email)
        if not user_doc or not verify_password(user_doc.to_dict().get('password', ''), password):
            raise ApiError("Invalid credentials", status_code=400, as_error_list=True)
        return self.token_service.issue(user_doc.id)
