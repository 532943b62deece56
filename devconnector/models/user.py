# devconnector/models/user.py
from dataclasses import dataclass, field
from datetime import datetime

from devconnector.utils.datetime_utils import now


@dataclass
class User:
    """
    Firestore 'users' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    password에는 단방향 해시만 저장합니다.
    """
    user_id: str
    name: str
    email: str
    password: str
    avatar: str
    date: datetime = field(default_factory=now)
