# devconnector/api/posts/schemas.py
from marshmallow import Schema, fields

from devconnector.schemas.base import RequestSchema, UtcDateTime, required_str

TEXT_MESSAGE = "Text is required"


# --- API 요청 스키마 ---

class PostCreateSchema(RequestSchema):
    """POST /api/post 요청 본문의 유효성을 검사합니다."""
    text = required_str(TEXT_MESSAGE)


class CommentCreateSchema(RequestSchema):
    """POST /api/post/comment/{post_id} 요청 본문의 유효성을 검사합니다."""
    text = required_str(TEXT_MESSAGE)


# --- 응답 스키마 ---

class LikeSchema(Schema):
    user = fields.Str(required=True)


class CommentResponseSchema(Schema):
    """댓글 응답. 이름/아바타는 댓글 작성 시점의 값입니다."""
    comment_id = fields.Str(required=True)
    user = fields.Str(required=True)
    text = fields.Str(required=True)
    name = fields.Str(allow_none=True)
    avatar = fields.Str(allow_none=True)
    date = UtcDateTime()


class PostResponseSchema(Schema):
    """게시글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    post_id = fields.Str(dump_only=True)
    user = fields.Str(required=True)
    text = fields.Str(required=True)
    name = fields.Str(allow_none=True)
    avatar = fields.Str(allow_none=True)
    likes = fields.List(fields.Nested(LikeSchema))
    comments = fields.List(fields.Nested(CommentResponseSchema))
    date = UtcDateTime()
