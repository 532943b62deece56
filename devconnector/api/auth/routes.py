# devconnector/api/auth/routes.py

import logging
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from devconnector.api.auth.schemas import LoginSchema, TokenResponseSchema, UserResponseSchema
from devconnector.core.errors import ApiError, SERVER_ERROR
from devconnector.schemas.base import get_json_body, validation_error_response

auth_bp = Blueprint('auth_bp', __name__)


@auth_bp.route('', methods=['GET'])
@jwt_required()
def get_current_user():
    """토큰의 사용자 정보를 비밀번호를 제외하고 반환합니다."""
    auth_service = current_app.services['auth']
    user_id = get_jwt_identity()
    try:
        user = auth_service.get_current(user_id)
        return jsonify(UserResponseSchema().dump(user)), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"현재 사용자 조회 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@auth_bp.route('', methods=['POST'])
def login():
    """이메일/비밀번호로 로그인하고 토큰을 발급합니다."""
    auth_service = current_app.services['auth']
    try:
        data = LoginSchema().load(get_json_body())
        token = auth_service.authenticate(data['email'], data['password'])
        return jsonify(TokenResponseSchema().dump({"token": token})), 200
    except ValidationError as err:
        return validation_error_response(err)
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"로그인 처리 중 오류 발생: {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500
