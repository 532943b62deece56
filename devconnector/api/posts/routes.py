# devconnector/api/posts/routes.py
import logging
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from devconnector.api.posts.schemas import (
    PostCreateSchema,
    CommentCreateSchema,
    PostResponseSchema,
    CommentResponseSchema,
    LikeSchema
)
from devconnector.core.errors import ApiError, SERVER_ERROR
from devconnector.schemas.base import get_json_body, validation_error_response

posts_bp = Blueprint('posts_bp', __name__)


@posts_bp.route('', methods=['GET'])
@jwt_required()
def get_posts():
    """전체 게시글을 최신순으로 조회합니다."""
    post_service = current_app.services['posts']
    try:
        posts = post_service.list_posts()
        return jsonify(PostResponseSchema(many=True).dump(posts)), 200
    except Exception as e:
        logging.error(f"게시글 목록 조회 중 오류 발생: {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@posts_bp.route('/<string:post_id>', methods=['GET'])
@jwt_required()
def get_post(post_id: str):
    post_service = current_app.services['posts']
    try:
        post = post_service.get_post(post_id)
        return jsonify(PostResponseSchema().dump(post)), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"게시글 조회 중 오류 발생 (post_id: {post_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@posts_bp.route('', methods=['POST'])
@jwt_required()
def create_post():
    """새 게시글을 작성합니다. 작성자의 이름/아바타가 게시글에 복사됩니다."""
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        data = PostCreateSchema().load(get_json_body())
        new_post = post_service.create_post(user_id, data['text'])
        return jsonify(PostResponseSchema().dump(new_post)), 200
    except ValidationError as err:
        return validation_error_response(err)
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"게시글 생성 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@posts_bp.route('/<string:post_id>', methods=['DELETE'])
@jwt_required()
def delete_post(post_id: str):
    """게시글을 삭제합니다. (작성자 본인만 가능)"""
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        post_service.delete_post(post_id, user_id)
        return jsonify({"msg": "Post removed"}), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"게시글 삭제 중 오류 발생 (post_id: {post_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@posts_bp.route('/like/<string:post_id>', methods=['PUT'])
@jwt_required()
def like_post(post_id: str):
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        likes = post_service.like(post_id, user_id)
        return jsonify(LikeSchema(many=True).dump(likes)), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"좋아요 처리 중 오류 발생 (post_id: {post_id}, user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@posts_bp.route('/unlike/<string:post_id>', methods=['PUT'])
@jwt_required()
def unlike_post(post_id: str):
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        likes = post_service.unlike(post_id, user_id)
        return jsonify(LikeSchema(many=True).dump(likes)), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"좋아요 취소 중 오류 발생 (post_id: {post_id}, user_id: {user_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@posts_bp.route('/comment/<string:post_id>', methods=['POST'])
@jwt_required()
def create_comment(post_id: str):
    """
    게시글에 댓글을 작성하고 갱신된 댓글 목록을 반환합니다.
    """
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        data = CommentCreateSchema().load(get_json_body())
        comments = post_service.add_comment(post_id, user_id, data['text'])
        return jsonify(CommentResponseSchema(many=True).dump(comments)), 200
    except ValidationError as err:
        return validation_error_response(err)
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"댓글 생성 중 오류 발생 (post_id: {post_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500


@posts_bp.route('/comment/<string:post_id>/<string:comment_id>', methods=['DELETE'])
@jwt_required()
def delete_comment(post_id: str, comment_id: str):
    """
    댓글을 삭제하고 갱신된 댓글 목록을 반환합니다. (작성자 본인만 가능)
    """
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        comments = post_service.remove_comment(post_id, comment_id, user_id)
        return jsonify(CommentResponseSchema(many=True).dump(comments)), 200
    except ApiError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"댓글 삭제 중 오류 발생 (comment_id: {comment_id}): {e}", exc_info=True)
        return jsonify(SERVER_ERROR), 500
