"""도메인 예외 베이스 클래스."""


class DomainError(Exception):
    """모든 도메인 예외의 베이스 클래스."""

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """참조한 id/slug가 존재하지 않음."""


class ConflictError(DomainError):
    """유일성 또는 참조 무결성 위반."""
