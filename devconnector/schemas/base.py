# devconnector/schemas/base.py
from typing import Any, Dict, List

from flask import jsonify, request
from marshmallow import Schema, fields, validate, ValidationError, EXCLUDE

from devconnector.utils.datetime_utils import DateTimeUtils


class RequestSchema(Schema):
    """
    모든 요청 본문 스키마의 기반 클래스.
    프론트엔드가 보내는 추가 필드는 오류 없이 무시합니다.
    """
    class Meta:
        unknown = EXCLUDE


class FlexibleDate(fields.Field):
    """
    '2020-01-15', '2020/01/15', '01-15-2020' 등 다양한 형식의 날짜 문자열을 받아
    Firestore에 저장 가능한 UTC datetime으로 변환하는 필드.
    빈 문자열은 필수 필드이면 required 오류, 선택 필드이면 None으로 취급합니다.
    """
    default_error_messages = {"invalid": "Not a valid date"}

    def _deserialize(self, value, attr, data, **kwargs):
        if value == "":
            if self.required:
                raise self.make_error("required")
            return None
        if not isinstance(value, str):
            raise self.make_error("invalid")
        try:
            return DateTimeUtils.for_firestore(DateTimeUtils.parse_date_string(value))
        except ValueError as error:
            raise self.make_error("invalid") from error

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return DateTimeUtils.to_iso_string(value)


class UtcDateTime(fields.DateTime):
    """응답용 타임스탬프 필드. 항상 Z 접미사가 붙은 UTC ISO 문자열로 직렬화합니다."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return DateTimeUtils.to_iso_string(value)


def required_str(message: str, **kwargs) -> fields.Str:
    """키가 없거나, null이거나, 빈 문자열이면 모두 같은 메시지로 실패하는 문자열 필드."""
    return fields.Str(
        required=True,
        validate=validate.Length(min=1, error=message),
        error_messages={"required": message, "null": message, "invalid": message},
        **kwargs
    )


def optional_str(**kwargs) -> fields.Str:
    return fields.Str(load_default=None, allow_none=True, **kwargs)


def get_json_body() -> Dict[str, Any]:
    """요청 본문이 없거나 JSON 객체가 아니면 빈 dict로 취급합니다."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def flatten_errors(messages: Any) -> List[Dict[str, str]]:
    """
    marshmallow의 err.messages({필드: [메시지, ...]})를
    [{"msg": ..., "param": 필드}, ...] 목록으로 펼칩니다.
    marshmallow는 필드를 선언 순서대로 검사하므로 목록도 그 순서를 따릅니다.
    """
    if isinstance(messages, (list, tuple)):
        return [{"msg": str(m)} for m in messages]
    errors = []
    for param, field_messages in messages.items():
        if isinstance(field_messages, dict):
            # 중첩 필드
            for nested in flatten_errors(field_messages):
                nested["param"] = f"{param}.{nested['param']}" if "param" in nested else param
                errors.append(nested)
            continue
        if not isinstance(field_messages, (list, tuple)):
            field_messages = [field_messages]
        for message in field_messages:
            entry = {"msg": str(message)}
            if param != "_schema":
                entry["param"] = param
            errors.append(entry)
    return errors


def validation_error_response(err: ValidationError):
    return jsonify({"errors": flatten_errors(err.messages)}), 400
