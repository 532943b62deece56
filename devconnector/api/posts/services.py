# devconnector/api/posts/services.py
import logging
import uuid
from dataclasses import asdict
from typing import Dict, Any, List

from firebase_admin import firestore

from devconnector.core.errors import AuthError, ConflictError, InternalError, NotFoundError
from devconnector.models.post import Post, Comment, Like
from devconnector.utils.datetime_utils import for_firestore
from devconnector.utils.embedded import prepend, find_by_key, remove_by_key

POST_NOT_FOUND = "Post not found"
NOT_AUTHORIZED = "User not authorized"


class PostService:
    """
    게시글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    댓글과 좋아요는 게시글 문서 안의 목록으로 저장되며 최신 항목이 맨 앞에 옵니다.

    좋아요/댓글 변경은 읽고-수정하고-쓰는 순서로 처리하며 트랜잭션으로 묶지 않습니다.
    같은 사용자의 동시 좋아요 두 건이 모두 사전 검사를 통과할 수 있습니다.
    """
    def __init__(self, db):
        self.db = db
        self.posts_ref = self.db.collection('posts')
        self.users_ref = self.db.collection('users')

    def _get_author(self, user_id: str) -> Dict[str, Any]:
        user_doc = self.users_ref.document(user_id).get()
        if not user_doc.exists:
            logging.error(f"유효한 토큰이 존재하지 않는 사용자를 가리킵니다 (user_id: {user_id})")
            raise InternalError()
        return user_doc.to_dict()

    def _get_post_snapshot(self, post_id: str):
        # 구조적으로 올바르지 않은 id도 '없는 게시글'로 취급합니다.
        try:
            uuid.UUID(post_id)
        except ValueError:
            raise NotFoundError(POST_NOT_FOUND)
        doc = self.posts_ref.document(post_id).get()
        if not doc.exists:
            raise NotFoundError(POST_NOT_FOUND)
        return doc

    def list_posts(self) -> List[Dict[str, Any]]:
        query = self.posts_ref.order_by('date', direction=firestore.Query.DESCENDING)
        return [doc.to_dict() for doc in query.stream()]

    def get_post(self, post_id: str) -> Dict[str, Any]:
        return self._get_post_snapshot(post_id).to_dict()

    def create_post(self, user_id: str, text: str) -> Dict[str, Any]:
        """작성자의 현재 이름/아바타를 복사해 게시글을 만듭니다. 이후 프로필 변경은 반영되지 않습니다."""
        author = self._get_author(user_id)
        post_id = str(uuid.uuid4())
        new_post = Post(
            post_id=post_id,
            user=user_id,
            text=text,
            name=author.get('name'),
            avatar=author.get('avatar')
        )
        post_data = for_firestore(asdict(new_post))
        self.posts_ref.document(post_id).set(post_data)
        logging.info(f"게시글 생성 완료 (post_id: {post_id}, user_id: {user_id})")
        return post_data

    def delete_post(self, post_id: str, user_id: str) -> None:
        """작성자 본인만 삭제할 수 있습니다. 내장된 댓글/좋아요도 함께 사라집니다."""
        doc = self._get_post_snapshot(post_id)
        if doc.to_dict().get('user') != user_id:
            raise AuthError(NOT_AUTHORIZED)
        self.posts_ref.document(post_id).delete()
        logging.info(f"게시글 삭제 완료 (post_id: {post_id})")

    # --- 좋아요 ---
    def like(self, post_id: str, user_id: str) -> List[Dict[str, Any]]:
        doc = self._get_post_snapshot(post_id)
        likes = doc.to_dict().get('likes') or []
        if find_by_key(likes, 'user', user_id):
            raise ConflictError("Post already liked")
        likes = prepend(likes, asdict(Like(user=user_id)))
        self.posts_ref.document(post_id).update({'likes': likes})
        return likes

    def unlike(self, post_id: str, user_id: str) -> List[Dict[str, Any]]:
        doc = self._get_post_snapshot(post_id)
        likes, removed = remove_by_key(doc.to_dict().get('likes'), 'user', user_id)
        if not removed:
            raise ConflictError("Post has not been liked")
        self.posts_ref.document(post_id).update({'likes': likes})
        return likes

    # --- 댓글 ---
    def add_comment(self, post_id: str, user_id: str, text: str) -> List[Dict[str, Any]]:
        author = self._get_author(user_id)
        doc = self._get_post_snapshot(post_id)
        new_comment = Comment(
            comment_id=str(uuid.uuid4()),
            user=user_id,
            text=text,
            name=author.get('name'),
            avatar=author.get('avatar')
        )
        comments = prepend(doc.to_dict().get('comments'), for_firestore(asdict(new_comment)))
        self.posts_ref.document(post_id).update({'comments': comments})
        return comments

    def remove_comment(self, post_id: str, comment_id: str, user_id: str) -> List[Dict[str, Any]]:
        """댓글 작성자 본인만 삭제할 수 있습니다."""
        doc = self._get_post_snapshot(post_id)
        comments = doc.to_dict().get('comments') or []
        comment = find_by_key(comments, 'comment_id', comment_id)
        if not comment:
            raise NotFoundError("Comment does not exist")
        if comment.get('user') != user_id:
            raise AuthError(NOT_AUTHORIZED)
        comments, _ = remove_by_key(comments, 'comment_id', comment_id)
        self.posts_ref.document(post_id).update({'comments': comments})
        return comments
