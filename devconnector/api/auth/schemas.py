# devconnector/api/auth/schemas.py
from marshmallow import Schema, fields

from devconnector.schemas.base import RequestSchema, UtcDateTime, required_str

EMAIL_MESSAGE = "Please include a valid email"


def email_field() -> fields.Email:
    return fields.Email(
        required=True,
        error_messages={"required": EMAIL_MESSAGE, "null": EMAIL_MESSAGE, "invalid": EMAIL_MESSAGE}
    )


class LoginSchema(RequestSchema):
    """POST /api/auth 요청 본문의 유효성을 검사합니다."""
    email = email_field()
    password = required_str("Please enter password")


class TokenResponseSchema(Schema):
    token = fields.Str(required=True)


class UserResponseSchema(Schema):
    """
    GET /api/auth 응답. 비밀번호 해시는 절대 포함하지 않습니다.
    """
    user_id = fields.Str(dump_only=True)
    name = fields.Str()
    email = fields.Email()
    avatar = fields.Str(allow_none=True)
    date = UtcDateTime()
