# devconnector/api/users/schemas.py
from marshmallow import fields, validate

from devconnector.api.auth.schemas import email_field
from devconnector.schemas.base import RequestSchema, required_str

PASSWORD_MESSAGE = "Please enter a password with 6 or more characters"


class RegisterSchema(RequestSchema):
    """
    POST /api/user
    회원가입 요청 본문의 유효성을 검사하는 스키마. 모든 필드를 검사한 뒤 오류를 한 번에 돌려줍니다.
    """
    name = required_str("Name is required")
    email = email_field()
    password = fields.Str(
        required=True,
        validate=validate.Length(min=6, error=PASSWORD_MESSAGE),
        error_messages={"required": PASSWORD_MESSAGE, "null": PASSWORD_MESSAGE, "invalid": PASSWORD_MESSAGE}
    )
