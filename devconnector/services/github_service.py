# devconnector/services/github_service.py

import logging
from typing import Any, Dict, List, Optional

import requests


class GithubService:
    """GitHub 공개 API에서 사용자의 최근 저장소 목록을 가져오는 서비스 클래스입니다."""

    def __init__(self, api_url: str, token: Optional[str] = None, timeout: float = 5):
        self.api_url = api_url.rstrip('/')
        self.token = token
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": "devconnector-api",
            "Accept": "application/vnd.github+json"
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def get_repos(self, username: str) -> Optional[List[Dict[str, Any]]]:
        """
        사용자의 저장소를 생성일 순으로 최대 5개 반환합니다.
        GitHub가 200 이외의 응답을 주면 None을 반환하고, 네트워크 오류는 그대로 올립니다.
        """
        response = requests.get(
            f"{self.api_url}/users/{username}/repos",
            params={"per_page": 5, "sort": "created:asc"},
            headers=self._headers(),
            timeout=self.timeout
        )
        if response.status_code != 200:
            logging.info(f"GitHub 저장소 조회 실패 (username: {username}, status: {response.status_code})")
            return None
        return response.json()
