# devconnector/core/errors.py
from typing import Any, Dict


class ApiError(Exception):
    """
    서비스 계층에서 발생시키는 API 오류의 기반 클래스.
    라우트는 status_code와 to_dict()로 그대로 응답을 만듭니다.
    """
    status_code = 500

    def __init__(self, message: str, status_code: int = None, as_error_list: bool = False):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        # 프론트엔드가 알림(alert)으로 표시하는 오류는 errors 배열 형식으로 내려줍니다.
        self.as_error_list = as_error_list

    def to_dict(self) -> Dict[str, Any]:
        if self.as_error_list:
            return {"errors": [{"msg": self.message}]}
        return {"msg": self.message}


class AuthError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 400


class InternalError(ApiError):
    """저장소/암호화 계층의 예기치 못한 실패. 상세 내용은 클라이언트에 노출하지 않습니다."""
    status_code = 500

    def __init__(self, message: str = "Server Error"):
        super().__init__(message)


SERVER_ERROR = {"msg": "Server Error"}
