# devconnector/models/post.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

from devconnector.utils.datetime_utils import now


@dataclass
class Like:
    """Post 문서의 likes 목록에 내장되는 좋아요. 게시글당 사용자별 최대 하나."""
    user: str


@dataclass
class Comment:
    """Post 문서의 comments 목록에 내장되는 댓글. 작성 시점의 이름/아바타를 복사해 둡니다."""
    comment_id: str
    user: str
    text: str
    name: str
    avatar: Optional[str] = None
    date: datetime = field(default_factory=now)


@dataclass
class Post:
    """
    Firestore 'posts' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    user(작성자 id)는 생성 후 바뀌지 않으며 삭제 권한의 유일한 기준입니다.
    """
    post_id: str
    user: str
    text: str
    name: str
    avatar: Optional[str] = None
    likes: List[Dict[str, Any]] = field(default_factory=list)
    comments: List[Dict[str, Any]] = field(default_factory=list)
    date: datetime = field(default_factory=now)
