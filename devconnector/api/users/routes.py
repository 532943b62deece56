# devconnector/api/users/routes.py
import logging
from flask import Blueprint, jsonify, current_app
from marshmallow import ValidationError

from devconnector.api.auth.schemas import TokenResponseSchema
from devconnector.api.users.schemas import RegisterSchema
from devconnector.core.errors import ApiError, SERVER_ERROR
from devconnector.schemas.base import get_json_body, validation_error_response

users_bp = Blueprint('users_bp', __name__)


@users_bp.route('', methods=['POST'])
def register_user():
    """
    회원가입. 성공 시 바로 로그인된 상태가 되도록 토큰을 반환합니다.
    """
    auth_service = current_app.services['auth']
    try:
        data = RegisterSchema().load(get_json_body())
        token = auth_service.register(data['name'], data['email'], data['password'])
        return jsonify(TokenResponseSchema().dump({"token": token})), 200
    except ValidationError as err:
        return validation_error_response(err)
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"회원가입 처리 중 오류 발생: {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500
