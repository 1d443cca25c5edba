"""
도메인 예외

서비스 계층은 HTTP를 모른다. 여기 정의된 예외를 던지면
main.py의 예외 핸들러가 상태 코드로 변환한다.
"""


class NovelHubError(Exception):
    """도메인 예외 기본 클래스"""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(NovelHubError):
    """참조한 리소스가 존재하지 않음"""
    status_code = 404


class ConflictError(NovelHubError):
    """고유 제약 위반 또는 참조 중인 리소스 삭제 시도"""
    status_code = 409
