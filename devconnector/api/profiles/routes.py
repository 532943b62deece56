# devconnector/api/profiles/routes.py
import logging
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from devconnector.api.profiles.schemas import (
    ProfileUpsertSchema,
    ExperienceCreateSchema,
    EducationCreateSchema,
    ProfileResponseSchema
)
from devconnector.core.errors import ApiError, SERVER_ERROR
from devconnector.schemas.base import get_json_body, validation_error_response

profiles_bp = Blueprint('profiles_bp', __name__)


def _profile_response(profile):
    return jsonify(ProfileResponseSchema().dump(profile)), 200


@profiles_bp.route('/me', methods=['GET'])
@jwt_required()
def get_my_profile():
    """현재 로그인된 사용자의 프로필을 조회합니다."""
    profile_service = current_app.services['profiles']
    user_id = get_jwt_identity()
    try:
        return _profile_response(profile_service.get_mine(user_id))
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"내 프로필 조회 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('', methods=['GET'])
def get_all_profiles():
    """모든 프로필 목록을 조회합니다 (공개)."""
    profile_service = current_app.services['profiles']
    try:
        profiles = profile_service.list_all()
        return jsonify(ProfileResponseSchema(many=True).dump(profiles)), 200
    except Exception as e:
        logging.error(f"프로필 목록 조회 중 오류 발생: {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('/user/<string:user_id>', methods=['GET'])
def get_profile_by_user(user_id: str):
    """특정 사용자의 프로필을 조회합니다 (공개)."""
    profile_service = current_app.services['profiles']
    try:
        return _profile_response(profile_service.get_by_user(user_id))
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"사용자 프로필 조회 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('/github/<string:username>', methods=['GET'])
def get_github_repos(username: str):
    """GitHub 사용자의 최근 저장소 목록을 그대로 전달합니다."""
    github_service = current_app.services['github']
    try:
        repos = github_service.get_repos(username)
        if repos is None:
            return jsonify({"msg": "No github profile found"}), 404
        return jsonify(repos), 200
    except Exception as e:
        logging.error(f"GitHub 저장소 조회 중 오류 발생 (username: {username}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('', methods=['POST'])
@jwt_required()
def upsert_my_profile():
    """
    현재 사용자의 프로필을 생성하거나, 이미 있으면 전달된 필드만 수정합니다.
    """
    profile_service = current_app.services['profiles']
    user_id = get_jwt_identity()
    try:
        data = ProfileUpsertSchema().load(get_json_body())
        return _profile_response(profile_service.upsert(user_id, data))
    except ValidationError as err:
        return validation_error_response(err)
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"프로필 저장 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('/experience', methods=['PUT'])
@jwt_required()
def add_experience():
    """경력 항목을 목록 맨 앞에 추가합니다. 프로필이 먼저 있어야 합니다."""
    profile_service = current_app.services['profiles']
    user_id = get_jwt_identity()
    try:
        data = ExperienceCreateSchema().load(get_json_body())
        return _profile_response(profile_service.add_experience(user_id, data))
    except ValidationError as err:
        return validation_error_response(err)
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"경력 추가 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('/education', methods=['PUT'])
@jwt_required()
def add_education():
    """학력 항목을 목록 맨 앞에 추가합니다. 프로필이 먼저 있어야 합니다."""
    profile_service = current_app.services['profiles']
    user_id = get_jwt_identity()
    try:
        data = EducationCreateSchema().load(get_json_body())
        return _profile_response(profile_service.add_education(user_id, data))
    except ValidationError as err:
        return validation_error_response(err)
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"학력 추가 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('/experience/<string:exp_id>', methods=['DELETE'])
@jwt_required()
def delete_experience(exp_id: str):
    profile_service = current_app.services['profiles']
    user_id = get_jwt_identity()
    try:
        return _profile_response(profile_service.remove_experience(user_id, exp_id))
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"경력 삭제 중 오류 발생 (exp_id: {exp_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('/education/<string:edu_id>', methods=['DELETE'])
@jwt_required()
def delete_education(edu_id: str):
    profile_service = current_app.services['profiles']
    user_id = get_jwt_identity()
    try:
        return _profile_response(profile_service.remove_education(user_id, edu_id))
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"학력 삭제 중 오류 발생 (edu_id: {edu_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@profiles_bp.route('', methods=['DELETE'])
@jwt_required()
def delete_my_account():
    """
    현재 로그인된 사용자의 프로필과 계정을 함께 삭제합니다.
    """
    profile_service = current_app.services['profiles']
    user_id = get_jwt_identity()
    try:
        profile_service.delete_account(user_id)
        return jsonify({"msg": "User removed"}), 200
    except Exception as e:
        logging.error(f"회원 탈퇴 처리 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500
