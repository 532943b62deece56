# devconnector/models/profile.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any

from devconnector.utils.datetime_utils import now

SOCIAL_FIELDS = ('youtube', 'twitter', 'facebook', 'linkedin', 'instagram')


@dataclass
class Experience:
    """Profile 문서의 experience 목록에 내장되는 경력 항목."""
    exp_id: str
    title: str
    company: str
    from_date: datetime
    location: Optional[str] = None
    to_date: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None


@dataclass
class Education:
    """Profile 문서의 education 목록에 내장되는 학력 항목."""
    edu_id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: datetime
    to_date: Optional[datetime] = None
    current: bool = False
    description: Optional[str] = None


@dataclass
class Profile:
    """
    Firestore 'profiles' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    문서 id는 소유자의 user_id이므로 사용자당 프로필은 최대 하나입니다.
    """
    user: str
    status: str
    skills: List[str]
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: Dict[str, str] = field(default_factory=dict)
    experience: List[Dict[str, Any]] = field(default_factory=list)
    education: List[Dict[str, Any]] = field(default_factory=list)
    date: datetime = field(default_factory=now)
