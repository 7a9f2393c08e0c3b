"""카탈로그 관련 예외."""


class ApplicationError(Exception):
    """모든 애플리케이션 예외의 베이스 클래스."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class UpstreamUnavailableError(ApplicationError):
    """외부 데이터 provider 호출 실패 (네트워크, 타임아웃, non-2xx, 잘못된 응답)."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Upstream '{source}' unavailable: {detail}")


class LoadFailureError(ApplicationError):
    """리소스 로드 실패 (주 provider 체인 소진)."""

    def __init__(self, resource_type: str, detail: str = "") -> None:
        self.resource_type = resource_type
        message = f"Failed to load '{resource_type}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnknownResourceTypeError(ApplicationError):
    """등록되지 않은 리소스 타입."""

    def __init__(self, resource_type: str) -> None:
        self.resource_type = resource_type
        super().__init__(f"Unknown resource type: {resource_type}")
