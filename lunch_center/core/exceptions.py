"""서비스 전역에서 쓰는 예외 정의.

모든 예외는 사용자에게 그대로 보여줄 수 있는 한국어 메시지와 HTTP 상태 코드를 가진다.
"""


class LunchCenterError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(LunchCenterError):
    """필수 API 키 등 설정 누락."""

    status_code = 500


class InvalidRequestError(LunchCenterError):
    status_code = 400


class LocationNotFoundError(LunchCenterError):
    status_code = 400


class UpstreamError(LunchCenterError):
    """카카오 등 외부 API가 실패 응답을 돌려준 경우."""

    status_code = 500

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class NotFoundError(LunchCenterError):
    status_code = 404


class ConflictError(LunchCenterError):
    status_code = 409
