# devconnector/utils/datetime_utils.py
"""
프로젝트 전체에서 일관된 시간/날짜 처리를 위한 유틸리티 모듈

- 모든 타임스탬프는 UTC timezone-aware datetime으로 저장합니다.
- 경력/학력의 from/to 같은 날짜 입력은 관대하게 파싱합니다 (2020-01-15, 2020/01/15, 01-15-2020 등).
- Firestore는 date 타입을 저장하지 못하므로 저장 전 datetime으로 변환합니다.
"""

import logging
from datetime import datetime, date, timezone, time
from typing import Any
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """시간/날짜 처리를 위한 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def parse_date_string(date_string: str) -> date:
        """
        경력/학력 입력의 from/to 문자열을 date로 파싱합니다.
        ISO 형식 외에 2024/01/15, 01-15-2024 도 허용하며 시간 부분은 버립니다.
        """
        try:
            if not date_string:
                raise ValueError("날짜 값이 비어 있습니다")
            return dateutil_parser.parse(date_string).date()
        except (ValueError, OverflowError) as e:
            logger.info(f"날짜 문자열 파싱 실패: {date_string} - {e}")
            raise ValueError(f"잘못된 날짜 형식입니다: {date_string}")

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """datetime 객체를 Z 접미사가 붙은 ISO 포맷 문자열로 변환"""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        else:
            dt = dt.astimezone(timezone.utc)
        return dt.isoformat().replace('+00:00', 'Z')

    @staticmethod
    def for_firestore(obj: Any) -> Any:
        """
        문서 dict를 Firestore에 쓰기 전에 날짜 값을 정규화합니다.

        date는 해당 일자 자정(UTC) datetime이 되고, naive datetime은 UTC로 간주합니다.
        중첩된 dict/list(경력, 댓글 배열 등)도 재귀적으로 처리합니다.
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        if isinstance(obj, date):
            return datetime.combine(obj, time.min).replace(tzinfo=timezone.utc)
        if isinstance(obj, dict):
            return {k: DateTimeUtils.for_firestore(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [DateTimeUtils.for_firestore(item) for item in obj]
        return obj


# 편의를 위한 글로벌 함수들
def now() -> datetime:
    """DateTimeUtils.now 단축형"""
    return DateTimeUtils.now()


def for_firestore(obj: Any) -> Any:
    """Firestore 저장용 변환"""
    return DateTimeUtils.for_firestore(obj)
