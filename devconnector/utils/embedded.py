# devconnector/utils/embedded.py
"""
문서 안에 내장된 순서 있는 목록(경력, 학력, 댓글, 좋아요)을 다루는 헬퍼.

목록은 항상 최신 항목이 맨 앞에 오며, 각 항목은 생성 시 부여된 id로 식별합니다.
삭제는 "id로 찾아서 있으면 제거, 없으면 아무것도 하지 않음"으로 정의합니다.
"""
from typing import Any, Dict, List, Optional, Tuple

Entry = Dict[str, Any]


def prepend(entries: Optional[List[Entry]], entry: Entry) -> List[Entry]:
    """새 항목을 맨 앞에 붙인 새 목록을 반환합니다."""
    return [entry] + list(entries or [])


def find_by_key(entries: Optional[List[Entry]], key: str, value: Any) -> Optional[Entry]:
    return next((e for e in entries or [] if e.get(key) == value), None)


def remove_by_key(entries: Optional[List[Entry]], key: str, value: Any) -> Tuple[List[Entry], bool]:
    """
    key 값이 일치하는 첫 번째 항목을 제거한 새 목록과 제거 여부를 반환합니다.
    일치하는 항목이 없으면 원래 목록을 그대로 돌려줍니다.
    """
    remaining = list(entries or [])
    for index, entry in enumerate(remaining):
        if entry.get(key) == value:
            del remaining[index]
            return remaining, True
    return remaining, False
