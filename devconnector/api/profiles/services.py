# devconnector/api/profiles/services.py
import logging
import uuid
from dataclasses import asdict
from typing import Dict, Any, List

from devconnector.core.errors import NotFoundError
from devconnector.models.profile import Profile, Experience, Education, SOCIAL_FIELDS
from devconnector.utils.datetime_utils import for_firestore
from devconnector.utils.embedded import prepend, remove_by_key

NO_PROFILE_MESSAGE = "There is no profile for this user"
PROFILE_FIELDS = ('company', 'website', 'location', 'bio', 'status', 'githubusername')


def parse_skills(skills: str) -> List[str]:
    """'python, flask ,  firestore' -> ['python', 'flask', 'firestore']"""
    return [skill.strip() for skill in skills.split(',') if skill.strip()]


class ProfileService:
    """
    프로필 관련 비즈니스 로직을 담당하는 서비스 클래스.
    프로필 문서 id는 소유자의 user_id이며, 경력/학력은 문서 안의 목록으로 관리합니다.
    """
    def __init__(self, db):
        self.db = db
        self.profiles_ref = self.db.collection('profiles')
        self.users_ref = self.db.collection('users')

    def _no_profile(self) -> NotFoundError:
        # 기존 프론트엔드와의 호환을 위해 404가 아닌 400으로 응답합니다.
        return NotFoundError(NO_PROFILE_MESSAGE, status_code=400)

    def _get_profile_snapshot(self, user_id: str):
        doc = self.profiles_ref.document(user_id).get()
        if not doc.exists:
            raise self._no_profile()
        return doc

    def _with_owner(self, profile_data: Dict[str, Any]) -> Dict[str, Any]:
        """프로필의 user 필드를 소유자의 {user_id, name, avatar}로 확장합니다."""
        owner_id = profile_data.get('user')
        owner_doc = self.users_ref.document(owner_id).get()
        owner = owner_doc.to_dict() if owner_doc.exists else {}
        profile_data['user'] = {
            "user_id": owner_id,
            "name": owner.get('name'),
            "avatar": owner.get('avatar')
        }
        return profile_data

    # --- 조회 ---
    def get_mine(self, user_id: str) -> Dict[str, Any]:
        return self.get_by_user(user_id)

    def get_by_user(self, user_id: str) -> Dict[str, Any]:
        return self._with_owner(self._get_profile_snapshot(user_id).to_dict())

    def list_all(self) -> List[Dict[str, Any]]:
        return [self._with_owner(doc.to_dict()) for doc in self.profiles_ref.stream()]

    # --- 생성/수정 ---
    def upsert(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        입력에 값이 있는 필드만 반영합니다.
        - 프로필이 없으면 생성하고, 있으면 해당 필드만 덮어씁니다 (social 링크는 키 단위로 병합).
        - 같은 입력으로 여러 번 호출해도 저장 결과는 같습니다.
        """
        profile_fields = {key: data[key] for key in PROFILE_FIELDS if data.get(key)}
        if data.get('skills'):
            profile_fields['skills'] = parse_skills(data['skills'])
        social = {key: data[key] for key in SOCIAL_FIELDS if data.get(key)}

        profile_ref = self.profiles_ref.document(user_id)
        doc = profile_ref.get()
        if doc.exists:
            existing_social = doc.to_dict().get('social') or {}
            profile_fields['social'] = {**existing_social, **social}
            profile_ref.update(profile_fields)
            logging.info(f"프로필 수정 완료 (user_id: {user_id})")
        else:
            new_profile = Profile(user=user_id, social=social, **profile_fields)
            profile_data = {k: v for k, v in asdict(new_profile).items() if v is not None}
            profile_ref.set(for_firestore(profile_data))
            logging.info(f"프로필 생성 완료 (user_id: {user_id})")
        return self.get_by_user(user_id)

    # --- 경력/학력 ---
    def _add_entry(self, user_id: str, list_name: str, entry: Dict[str, Any]) -> Dict[str, Any]:
        doc = self._get_profile_snapshot(user_id)
        entries = prepend(doc.to_dict().get(list_name), for_firestore(entry))
        self.profiles_ref.document(user_id).update({list_name: entries})
        return self.get_by_user(user_id)

    def _remove_entry(self, user_id: str, list_name: str, key: str, entry_id: str) -> Dict[str, Any]:
        doc = self._get_profile_snapshot(user_id)
        entries, removed = remove_by_key(doc.to_dict().get(list_name), key, entry_id)
        if removed:
            self.profiles_ref.document(user_id).update({list_name: entries})
        else:
            logging.info(f"삭제할 {list_name} 항목이 없습니다 (user_id: {user_id}, {key}: {entry_id})")
        return self.get_by_user(user_id)

    def add_experience(self, user_id: str, entry: Dict[str, Any]) -> Dict[str, Any]:
        experience = Experience(exp_id=str(uuid.uuid4()), **entry)
        return self._add_entry(user_id, 'experience', asdict(experience))

    def add_education(self, user_id: str, entry: Dict[str, Any]) -> Dict[str, Any]:
        education = Education(edu_id=str(uuid.uuid4()), **entry)
        return self._add_entry(user_id, 'education', asdict(education))

    def remove_experience(self, user_id: str, exp_id: str) -> Dict[str, Any]:
        return self._remove_entry(user_id, 'experience', 'exp_id', exp_id)

    def remove_education(self, user_id: str, edu_id: str) -> Dict[str, Any]:
        return self._remove_entry(user_id, 'education', 'edu_id', edu_id)

    # --- 회원 탈퇴 ---
    def delete_account(self, user_id: str) -> None:
        """
        프로필과 사용자 문서를 하나의 WriteBatch로 함께 삭제합니다.
        배치는 원자적으로 커밋되므로 한쪽만 지워진 상태가 남지 않습니다.
        작성한 게시글과 댓글은 그대로 둡니다.
        """
        batch = self.db.batch()
        batch.delete(self.profiles_ref.document(user_id))
        batch.delete(self.users_ref.document(user_id))
        batch.commit()
        logging.info(f"회원 탈퇴 완료 (user_id: {user_id})")
