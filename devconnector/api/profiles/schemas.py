# devconnector/api/profiles/schemas.py
from marshmallow import Schema, fields

from devconnector.schemas.base import RequestSchema, FlexibleDate, UtcDateTime, required_str, optional_str

FROM_DATE_MESSAGE = "From date is required"


# --- API 요청 스키마 ---

class ProfileUpsertSchema(RequestSchema):
    """
    POST /api/profile
    프로필 생성/수정 요청. status와 skills만 필수이며 skills는 쉼표로 구분된 문자열입니다.
    """
    status = required_str("Status is required")
    skills = required_str("Skills are required")
    company = optional_str()
    website = optional_str()
    location = optional_str()
    bio = optional_str()
    githubusername = optional_str()
    youtube = optional_str()
    twitter = optional_str()
    facebook = optional_str()
    linkedin = optional_str()
    instagram = optional_str()


class ExperienceCreateSchema(RequestSchema):
    """PUT /api/profile/experience 요청 본문의 유효성을 검사합니다."""
    title = required_str("Title is required")
    company = required_str("Company is required")
    from_date = FlexibleDate(
        data_key='from', required=True,
        error_messages={"required": FROM_DATE_MESSAGE, "null": FROM_DATE_MESSAGE}
    )
    location = optional_str()
    to_date = FlexibleDate(data_key='to', load_default=None, allow_none=True)
    current = fields.Bool(load_default=False)
    description = optional_str()


class EducationCreateSchema(RequestSchema):
    """PUT /api/profile/education 요청 본문의 유효성을 검사합니다."""
    school = required_str("School is required")
    degree = required_str("Degree is required")
    fieldofstudy = required_str("Field of study is required")
    from_date = FlexibleDate(
        data_key='from', required=True,
        error_messages={"required": FROM_DATE_MESSAGE, "null": FROM_DATE_MESSAGE}
    )
    to_date = FlexibleDate(data_key='to', load_default=None, allow_none=True)
    current = fields.Bool(load_default=False)
    description = optional_str()


# --- 응답 스키마 ---

class ProfileOwnerSchema(Schema):
    """프로필 응답에 합쳐지는 소유자 정보."""
    user_id = fields.Str()
    name = fields.Str(allow_none=True)
    avatar = fields.Str(allow_none=True)


class SocialSchema(Schema):
    youtube = fields.Str()
    twitter = fields.Str()
    facebook = fields.Str()
    linkedin = fields.Str()
    instagram = fields.Str()


class ExperienceResponseSchema(Schema):
    exp_id = fields.Str()
    title = fields.Str()
    company = fields.Str()
    location = fields.Str(allow_none=True)
    from_date = FlexibleDate(data_key='from')
    to_date = FlexibleDate(data_key='to', allow_none=True)
    current = fields.Bool()
    description = fields.Str(allow_none=True)


class EducationResponseSchema(Schema):
    edu_id = fields.Str()
    school = fields.Str()
    degree = fields.Str()
    fieldofstudy = fields.Str()
    from_date = FlexibleDate(data_key='from')
    to_date = FlexibleDate(data_key='to', allow_none=True)
    current = fields.Bool()
    description = fields.Str(allow_none=True)


class ProfileResponseSchema(Schema):
    """프로필 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    user = fields.Nested(ProfileOwnerSchema)
    status = fields.Str()
    skills = fields.List(fields.Str())
    company = fields.Str()
    website = fields.Str()
    location = fields.Str()
    bio = fields.Str()
    githubusername = fields.Str()
    social = fields.Nested(SocialSchema)
    experience = fields.List(fields.Nested(ExperienceResponseSchema))
    education = fields.List(fields.Nested(EducationResponseSchema))
    date = UtcDateTime()
